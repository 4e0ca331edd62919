"""Shared utilities for service layer."""
from typing import Iterable, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from schoolvote.core.exceptions import NotFound
from schoolvote.db.models import User, Vote

ModelT = TypeVar("ModelT")


def get_or_404(db: Session, model: Type[ModelT], entity_id: int, label: Optional[str] = None) -> ModelT:
    """Fetch a row by primary key or raise NotFound("<Label> not found")."""
    instance = db.get(model, entity_id)
    if instance is None:
        raise NotFound(f"{label or model.__name__} not found")
    return instance


def apply_changes(instance, changes: dict) -> None:
    """Copy a partial update onto an ORM instance, ignoring unknown keys."""
    for field, value in changes.items():
        if hasattr(instance, field):
            setattr(instance, field, value)


def voter_ids_for(db: Session, **criteria) -> set:
    """Return ids of users holding a Vote matching ``criteria`` (e.g. candidate_id=3)."""
    query = db.query(Vote.user_id).distinct()
    for column, value in criteria.items():
        query = query.filter(getattr(Vote, column) == value)
    return {user_id for (user_id,) in query.all()}


def sync_has_voted(db: Session, user_ids: Optional[Iterable[int]] = None) -> None:
    """
    Re-derive the has-voted flag from the Vote table.

    Called after deletes that remove Vote rows through cascades, so the
    denormalized flag keeps meaning "has at least one Vote". Flushes
    pending changes but does not commit.

    Args:
        db: Database session
        user_ids: Restrict the refresh to these users (None for every user)
    """
    db.flush()

    query = db.query(User)
    if user_ids is not None:
        user_ids = list(user_ids)
        if not user_ids:
            return
        query = query.filter(User.id.in_(user_ids))

    still_voted = {user_id for (user_id,) in db.query(Vote.user_id).distinct().all()}
    for user in query.all():
        user.has_voted = user.id in still_voted
