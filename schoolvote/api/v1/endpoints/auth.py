"""Authentication endpoints."""
import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from schoolvote.api.deps import get_current_user, get_db
from schoolvote.core.rate_limit import RATE_LIMITS, limiter
from schoolvote.core.security import clear_session_cookie, set_session_cookie
from schoolvote.db.models import User
from schoolvote.schemas import LoginRequest, SchoolLevelSelection, SessionUser, SuccessResponse
from schoolvote.services.users import authenticate_user, select_school_level

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=SessionUser)
@limiter.limit(RATE_LIMITS["login"])
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Sign in with a name and reference number.

    Students and admins use the same form. On success the session token is
    stored in an httpOnly cookie and the session user is returned.

    Example:
        Request:
            POST /api/v1/auth/login
            {
                "name": "Juan Dela Cruz",
                "referenceNumber": "2025-0142"
            }

        Response (200):
            {
                "id": 7,
                "name": "Juan Dela Cruz",
                "isAdmin": false,
                "hasVoted": false,
                "schoolLevel": null,
                "gradeLevel": null
            }

        Response (401):
            {
                "detail": "Invalid credentials",
                "code": "Unauthenticated"
            }

    Rate Limit:
        60 requests per minute per IP
    """
    user = authenticate_user(db, credentials.name, credentials.reference_number)
    set_session_cookie(response, user)
    logger.info(f"User {user.id} logged in (admin={user.is_admin})")
    return user


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response) -> SuccessResponse:
    """Clear the session cookie. Safe to call without a session."""
    clear_session_cookie(response)
    return SuccessResponse(success=True, message="Logged out successfully")


@router.get("/me", response_model=SessionUser)
async def me(user: User = Depends(get_current_user)):
    """Return the current session user, read fresh from the database."""
    return user


@router.post("/select-level", response_model=SessionUser)
@limiter.limit(RATE_LIMITS["select_level"])
async def select_level(
    request: Request,
    response: Response,
    selection: SchoolLevelSelection,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Record the student's school level and grade.

    The ballot only offers positions and candidates open to this level and
    grade, and votes outside it are rejected. The session cookie is
    refreshed with the new values.
    """
    updated = select_school_level(db, user.id, selection.school_level, selection.grade_level)
    set_session_cookie(response, updated)
    return updated
