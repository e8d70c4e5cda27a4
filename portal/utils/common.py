"""
Common utility functions used across multiple routes.
"""

from datetime import datetime

from learning.aggregator import ProgressSummary
from portal.models.models import User as DbUser
from portal.schemas.progress_schemas import DayXpResponse, ProgressSummaryResponse
from portal.schemas.user_schemas import Preferences, User


def iso_format(dt: datetime) -> str:
    """Format datetime as ISO string with Z suffix."""
    return dt.isoformat() + "Z"


def preferences_of(user: DbUser) -> Preferences:
    """Stored preferences, tolerating missing or partial JSON."""
    prefs = user.preferences if isinstance(user.preferences, dict) else {}
    interests = prefs.get("interests")
    style = prefs.get("style")
    return Preferences(
        interests=[str(i) for i in interests] if isinstance(interests, list) else [],
        style=style if isinstance(style, str) else "",
    )


def display_name(user: DbUser) -> str:
    """Full name if set, else the email prefix."""
    if isinstance(user.full_name, str) and user.full_name.strip():
        return user.full_name.strip()
    return user.email.split("@", 1)[0]


def user_schema(user: DbUser) -> User:
    return User(
        id=int(user.id),
        email=user.email,
        role=user.role,
        full_name=user.full_name or "",
        first_time_login=bool(user.first_time_login),
        preferences=preferences_of(user) if user.preferences is not None else None,
    )


def summary_response(summary: ProgressSummary, total_modules: int) -> ProgressSummaryResponse:
    return ProgressSummaryResponse(
        xp=summary.xp,
        streak=summary.streak,
        completed_count=summary.completed_count,
        completion_ratio=summary.completion_ratio,
        total_modules=total_modules,
        weekly_series=[DayXpResponse(**p) for p in summary.weekly_series.to_list()],
    )


def analysis_insights(interests: list[str], parent_aspiration: str | None) -> str:
    """Short explanation shown above the recommended path."""
    if interests:
        text = f"Based on your interest in {', '.join(interests)}, we've curated a list of modules to get you started."
    else:
        text = "Tell us what you're interested in to get a personalised list of modules."
    if parent_aspiration:
        text += (
            f" To align with your parent's aspiration of you becoming a {parent_aspiration},"
            " we're prioritizing modules that build foundational skills in relevant areas."
        )
    text += " As you complete modules, your recommendations will adapt."
    return text
