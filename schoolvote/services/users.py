"""User business logic."""
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from schoolvote.core.constants import SCHOOL_LEVELS, grades_for_level
from schoolvote.core.exceptions import (
    DuplicateKey,
    SelfDeletion,
    Unauthenticated,
    ValidationError,
)
from schoolvote.core.logging_config import get_logger
from schoolvote.db.models import User, Vote
from schoolvote.services.utils import apply_changes, get_or_404

logger = get_logger(__name__)


def check_level_and_grade(school_level: Optional[str], grade_level: Optional[int]) -> None:
    """Raise ValidationError unless the grade belongs to the school level."""
    if school_level is None and grade_level is None:
        return
    if school_level is not None and school_level not in SCHOOL_LEVELS:
        raise ValidationError(f"Unknown school level: {school_level}")
    if grade_level is None:
        return
    if school_level is None:
        raise ValidationError("A grade level requires a school level")
    if grade_level not in grades_for_level(school_level):
        raise ValidationError(f"Grade {grade_level} is not part of {school_level}")


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_reference_number(db: Session, reference_number: str) -> Optional[User]:
    """Look up a user by their unique reference number."""
    return db.query(User).filter(User.reference_number == reference_number).first()


def get_all_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()


def authenticate_user(db: Session, name: str, reference_number: str) -> User:
    """
    Verify login credentials.

    The reference number identifies the account; the name must match it
    (case-insensitive) so a leaked number alone is not enough.

    Raises:
        Unauthenticated: If no user matches both fields
    """
    user = get_user_by_reference_number(db, reference_number)
    if not user or user.name.casefold() != name.casefold():
        logger.info("login_failed", reference_number=reference_number)
        raise Unauthenticated("Invalid credentials")
    return user


def create_user(
    db: Session,
    name: str,
    reference_number: str,
    is_admin: bool = False,
    school_level: Optional[str] = None,
    grade_level: Optional[int] = None,
) -> User:
    """
    Create a user.

    Raises:
        DuplicateKey: If the reference number is already taken
        ValidationError: If grade and school level do not match
    """
    check_level_and_grade(school_level, grade_level)

    if get_user_by_reference_number(db, reference_number):
        raise DuplicateKey()

    user = User(
        name=name,
        reference_number=reference_number,
        is_admin=is_admin,
        has_voted=False,
        school_level=school_level,
        grade_level=grade_level,
    )

    try:
        db.add(user)
        db.commit()
    except IntegrityError:
        # Concurrent create with the same reference number
        db.rollback()
        raise DuplicateKey()

    db.refresh(user)
    logger.info("user_created", user_id=user.id, is_admin=user.is_admin)
    return user


def create_users_bulk(db: Session, rows: List[Dict]) -> List[Dict]:
    """
    Create many users, skipping rows whose reference number already exists.

    Each row is committed on its own so one bad row does not sink the batch.

    Args:
        db: Database session
        rows: Dicts with the keyword arguments of ``create_user``

    Returns:
        One result dict per input row, in order
    """
    results = []
    for row in rows:
        try:
            user = create_user(db, **row)
        except (DuplicateKey, ValidationError) as e:
            results.append({
                "success": False,
                "reference_number": row.get("reference_number"),
                "message": e.message,
            })
            continue

        results.append({
            "success": True,
            "id": user.id,
            "name": user.name,
            "reference_number": user.reference_number,
        })

    created = sum(1 for r in results if r["success"])
    logger.info("users_bulk_created", created=created, skipped=len(results) - created)
    return results


def update_user(db: Session, user_id: int, changes: Dict) -> User:
    """
    Apply a partial update to a user.

    Raises:
        NotFound: If the user does not exist
        DuplicateKey: If the new reference number belongs to another user
    """
    user = get_or_404(db, User, user_id, "User")

    reference_number = changes.get("reference_number")
    if reference_number:
        existing = get_user_by_reference_number(db, reference_number)
        if existing and existing.id != user.id:
            raise DuplicateKey()

    check_level_and_grade(
        changes.get("school_level", user.school_level),
        changes.get("grade_level", user.grade_level),
    )

    apply_changes(user, changes)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateKey()

    db.refresh(user)
    return user


def select_school_level(db: Session, user_id: int, school_level: str, grade_level: int) -> User:
    """
    Record the school level and grade a student picked before voting.

    Once the student holds a vote the choice is locked; an admin reset of
    their votes unlocks it again.

    Raises:
        ValidationError: If the grade does not fit the level, or the student
            already voted under a different level or grade
    """
    check_level_and_grade(school_level, grade_level)

    user = get_or_404(db, User, user_id, "User")
    changed = (user.school_level, user.grade_level) != (school_level, grade_level)
    if changed and db.query(Vote.id).filter(Vote.user_id == user.id).first() is not None:
        logger.info("school_level_change_rejected", user_id=user.id)
        raise ValidationError("School level and grade cannot change after voting")

    user.school_level = school_level
    user.grade_level = grade_level
    db.commit()
    db.refresh(user)

    logger.info("school_level_selected", user_id=user.id, school_level=school_level, grade_level=grade_level)
    return user


def delete_user(db: Session, user_id: int, actor_id: Optional[int] = None) -> None:
    """
    Delete a user and their votes.

    Raises:
        SelfDeletion: If ``actor_id`` is the user being deleted
        NotFound: If the user does not exist
    """
    if actor_id is not None and user_id == actor_id:
        raise SelfDeletion()

    user = get_or_404(db, User, user_id, "User")
    db.delete(user)
    db.commit()
    logger.info("user_deleted", user_id=user_id, actor_id=actor_id)


def ensure_admin_user(db: Session, name: str, reference_number: str) -> User:
    """Create the bootstrap admin account if its reference number is unused."""
    existing = get_user_by_reference_number(db, reference_number)
    if existing:
        if not existing.is_admin:
            logger.warning("admin_seed_conflict", user_id=existing.id)
        return existing
    return create_user(db, name=name, reference_number=reference_number, is_admin=True)
