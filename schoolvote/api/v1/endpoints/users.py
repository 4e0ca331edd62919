"""User management endpoints (admin only)."""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from schoolvote.api.deps import get_db, require_admin
from schoolvote.db.models import User
from schoolvote.schemas import BulkUserResult, UserCreate, UserResponse, UserUpdate
from schoolvote.services.users import create_user, create_users_bulk, delete_user, get_all_users, update_user
from schoolvote.services.vote import reset_user_vote

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=List[UserResponse])
async def list_users(db: Session = Depends(get_db)):
    return get_all_users(db)


@router.post("", response_model=UserResponse, status_code=201)
async def create_user_endpoint(user: UserCreate, db: Session = Depends(get_db)):
    """
    Create a single student or admin.

    Raises:
        409 if the reference number is already taken
        400 if gradeLevel is not part of schoolLevel
    """
    return create_user(db, **user.model_dump())


@router.post("/bulk", response_model=List[BulkUserResult], status_code=201)
async def create_users_bulk_endpoint(users: List[UserCreate], db: Session = Depends(get_db)):
    """
    Import many users from a JSON array.

    Rows with a reference number that already exists (in the database or
    earlier in the same batch) are skipped and reported with
    ``success: false``; the rest are created.

    Example:
        Request:
            POST /api/v1/users/bulk
            [
                {"name": "Ana Santos", "referenceNumber": "2025-0001"},
                {"name": "Ben Cruz", "referenceNumber": "2025-0001"}
            ]

        Response (201):
            [
                {"success": true, "id": 12, "name": "Ana Santos", "referenceNumber": "2025-0001"},
                {"success": false, "referenceNumber": "2025-0001",
                 "message": "User with this reference number already exists"}
            ]
    """
    results = create_users_bulk(db, [u.model_dump() for u in users])
    logger.info(f"Bulk import processed {len(results)} rows")
    return results


@router.put("/{user_id}", response_model=UserResponse)
async def update_user_endpoint(user_id: int, changes: UserUpdate, db: Session = Depends(get_db)):
    return update_user(db, user_id, changes.model_dump(exclude_unset=True))


@router.delete("/{user_id}", status_code=204)
async def delete_user_endpoint(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Delete a user and their votes.

    Admins cannot delete their own account (400).
    """
    delete_user(db, user_id, actor_id=admin.id)
    return Response(status_code=204)


@router.post("/{user_id}/reset-vote", response_model=UserResponse)
async def reset_vote_endpoint(user_id: int, db: Session = Depends(get_db)):
    """
    Delete every vote a user cast and clear their ``hasVoted`` flag so they
    can vote again.
    """
    user = reset_user_vote(db, user_id)
    logger.info(f"Votes reset for user {user_id}")
    return user
