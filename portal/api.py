from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from learning.errors import AlreadyCompleted, InvalidAmount, InvalidArgument, NotFound, ProgressError
from portal.routes.auth_routes import auth_routes
from portal.routes.catalog_routes import catalog_routes
from portal.routes.parent_routes import parent_routes
from portal.routes.student_routes import student_routes
from portal.routes.teacher_routes import teacher_routes
from portal.routes.user_routes import user_routes
from portal.config import create_db, settings
from portal.utils.logger import configure_logging, set_request_id, clear_request_id
from fastapi import Request
from starlette.responses import Response, JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

logger = configure_logging()

PROGRESS_ERROR_STATUS = {
    InvalidAmount: 400,
    InvalidArgument: 400,
    AlreadyCompleted: 409,
    NotFound: 404,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db()
    logger.info("portal started db=%s day_boundary_tz=%s", settings.DATABASE_URL.split("://", 1)[0], settings.DAY_BOUNDARY_TZ)
    yield


app = FastAPI(title="Taru Portal", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logger(request: Request, call_next):
    rid = set_request_id(request.headers.get("x-request-id"))
    try:
        logger.info("request start method=%s path=%s client=%s", request.method, request.url.path, request.client)
        response: Response = await call_next(request)
        logger.info("request end status=%s method=%s path=%s", response.status_code, request.method, request.url.path)
        response.headers["x-request-id"] = rid
        return response
    except Exception:
        logger.exception("request error method=%s path=%s", request.method, request.url.path)
        raise
    finally:
        clear_request_id()


@app.exception_handler(ProgressError)
async def progress_error_handler(request: Request, exc: ProgressError) -> JSONResponse:
    status_code = PROGRESS_ERROR_STATUS.get(type(exc), 400)
    logger.warning("progress error code=%s status=%s path=%s detail=%s", exc.code, status_code, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "code": exc.code})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    # Log server-side errors with stack traces; client errors as warnings.
    if exc.status_code >= 500:
        logger.exception("http error status=%s method=%s path=%s detail=\n%s", exc.status_code, request.method, request.url.path, exc.detail)
    else:
        logger.warning("http error status=%s method=%s path=%s detail=\n%s", exc.status_code, request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("validation error method=%s path=%s errors=\n%s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never leak internal exception details to clients.
    logger.exception("unhandled error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


@app.get("/")
def read_root():
    return {"message": "Taru Portal is Healthy"}

app.include_router(auth_routes, prefix="/auth")
app.include_router(user_routes, prefix="/api")
app.include_router(catalog_routes, prefix="/api")
app.include_router(student_routes, prefix="/api")
app.include_router(parent_routes, prefix="/api")
app.include_router(teacher_routes, prefix="/api")

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
