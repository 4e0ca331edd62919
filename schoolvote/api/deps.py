"""Shared API dependencies."""
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from schoolvote.core.exceptions import Unauthenticated, Unauthorized
from schoolvote.core.security import get_session_payload
from schoolvote.db import get_db, get_db_context
from schoolvote.db.models import User

__all__ = [
    "get_db",
    "get_db_context",
    "get_session_user_id",
    "get_current_user",
    "require_admin",
]


def get_session_user_id(request: Request) -> Optional[int]:
    """User id from the session cookie, or None when there is no cookie."""
    payload = get_session_payload(request)
    if payload is None:
        return None
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise Unauthenticated("Invalid session")


def get_current_user(
    user_id: Optional[int] = Depends(get_session_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Load the authenticated user; sessions of deleted users are rejected."""
    if user_id is None:
        raise Unauthenticated()
    user = db.get(User, user_id)
    if not user:
        raise Unauthenticated("User not found")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise Unauthorized()
    return user
