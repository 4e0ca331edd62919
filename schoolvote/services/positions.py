"""Position business logic."""
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from schoolvote.core.logging_config import get_logger
from schoolvote.db.models import Position
from schoolvote.services.utils import apply_changes, get_or_404, sync_has_voted, voter_ids_for

logger = get_logger(__name__)


def get_position(db: Session, position_id: int) -> Optional[Position]:
    return db.get(Position, position_id)


def get_all_positions(db: Session) -> List[Position]:
    """All positions in ballot order."""
    return db.query(Position).order_by(Position.display_order, Position.id).all()


def create_position(
    db: Session,
    name: str,
    school_levels: List[str],
    display_order: int,
    max_votes: int = 1,
) -> Position:
    """Create a new position."""
    position = Position(
        name=name,
        max_votes=max_votes,
        school_levels=list(school_levels),
        display_order=display_order,
    )
    db.add(position)
    db.commit()
    db.refresh(position)
    return position


def update_position(db: Session, position_id: int, changes: Dict) -> Position:
    position = get_or_404(db, Position, position_id, "Position")
    if "school_levels" in changes:
        # JSON columns only notice reassignment, not in-place mutation
        changes = {**changes, "school_levels": list(changes["school_levels"])}
    apply_changes(position, changes)
    db.commit()
    db.refresh(position)
    return position


def delete_position(db: Session, position_id: int) -> None:
    """Delete a position with its candidates and votes."""
    position = get_or_404(db, Position, position_id, "Position")
    affected = voter_ids_for(db, position_id=position_id)

    db.delete(position)
    sync_has_voted(db, affected)
    db.commit()
    logger.info("position_deleted", position_id=position_id, affected_voters=len(affected))
