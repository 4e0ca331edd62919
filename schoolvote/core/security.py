"""Session token utilities.

A signed JWT in an httpOnly cookie carries the authenticated identity.
The token is the session: it records who the user is and a snapshot of
their ballot state (school level, grade, has-voted) for the client.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Request, Response

from schoolvote.core import config
from schoolvote.core.exceptions import Unauthenticated


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=config.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, config.settings.SECRET_KEY, algorithm=config.settings.ALGORITHM)
    return encoded_jwt


def session_claims(user) -> dict:
    """Build the token claims for a user record."""
    return {
        # JWT requires "sub" to be a string
        "sub": str(user.id),
        "is_admin": bool(user.is_admin),
        "has_voted": bool(user.has_voted),
        "school_level": user.school_level,
        "grade_level": user.grade_level,
    }


def create_session_token(user) -> str:
    return create_access_token(session_claims(user))


def decode_session_token(token: str) -> dict:
    """Decode and verify a session token, raising Unauthenticated on any failure."""
    try:
        payload = jwt.decode(token, config.settings.SECRET_KEY, algorithms=[config.settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Session expired")
    except jwt.PyJWTError:
        raise Unauthenticated("Invalid session")

    if not payload.get("sub"):
        raise Unauthenticated("Invalid session")
    return payload


def get_session_payload(request: Request) -> Optional[dict]:
    """Return the verified session payload from the request cookie, or None if absent."""
    token = request.cookies.get(config.settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return decode_session_token(token)


def set_session_cookie(response: Response, user) -> None:
    """Issue (or refresh) the session cookie for ``user``."""
    response.set_cookie(
        key=config.settings.SESSION_COOKIE_NAME,
        value=create_session_token(user),
        httponly=True,  # Prevents JavaScript access
        secure=config.settings.is_production,  # Requires HTTPS in production
        samesite="lax",
        max_age=config.settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=config.settings.SESSION_COOKIE_NAME)
