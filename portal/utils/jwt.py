from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import HTTPException, status
from jose import JWTError
from jose.jwt import encode, decode
from pydantic import ValidationError

from portal.config import settings
from portal.schemas.auth_schemas import CLAIMS_VERSION, TokenClaims
from portal.utils.logger import configure_logging

logger = configure_logging()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        logger.warning("password check failed: malformed hash")
        return False


def get_password_hash(password: str) -> str:
    """Hash a password for storing."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def create_access_token(claims: TokenClaims) -> str:
    """Create a JWT access token. Fills in `exp` from settings when missing."""
    if claims.exp is None:
        claims = claims.model_copy(
            update={"exp": datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)}
        )
    return encode(claims.model_dump(), settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: Optional[str]) -> TokenClaims:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")
    try:
        payload = decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        claims = TokenClaims(**payload)
    except JWTError as e:
        logger.info("token rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
    except ValidationError as e:
        logger.info("token claims rejected: %s", e.errors())
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token claims")
    if claims.ver != CLAIMS_VERSION:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unsupported token version")
    return claims
