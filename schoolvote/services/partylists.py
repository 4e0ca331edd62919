"""Partylist business logic."""
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from schoolvote.core.logging_config import get_logger
from schoolvote.db.models import Candidate, Partylist, Vote
from schoolvote.services.utils import apply_changes, get_or_404, sync_has_voted

logger = get_logger(__name__)


def get_partylist(db: Session, partylist_id: int) -> Optional[Partylist]:
    return db.get(Partylist, partylist_id)


def get_all_partylists(db: Session) -> List[Partylist]:
    return db.query(Partylist).order_by(Partylist.id).all()


def create_partylist(
    db: Session,
    name: str,
    color: str,
    logo: Optional[str] = None,
    platform_image: Optional[str] = None,
    group_photo: Optional[str] = None,
) -> Partylist:
    """Create a new partylist."""
    partylist = Partylist(
        name=name,
        color=color,
        logo=logo,
        platform_image=platform_image,
        group_photo=group_photo,
    )
    db.add(partylist)
    db.commit()
    db.refresh(partylist)
    return partylist


def update_partylist(db: Session, partylist_id: int, changes: Dict) -> Partylist:
    partylist = get_or_404(db, Partylist, partylist_id, "Partylist")
    apply_changes(partylist, changes)
    db.commit()
    db.refresh(partylist)
    return partylist


def delete_partylist(db: Session, partylist_id: int) -> None:
    """
    Delete a partylist together with its candidates and their votes.

    Students whose only votes went to this partylist's candidates get their
    has-voted flag cleared.
    """
    partylist = get_or_404(db, Partylist, partylist_id, "Partylist")

    affected = {
        user_id for (user_id,) in
        db.query(Vote.user_id)
        .join(Candidate, Candidate.id == Vote.candidate_id)
        .filter(Candidate.partylist_id == partylist_id)
        .distinct()
        .all()
    }

    db.delete(partylist)
    sync_has_voted(db, affected)
    db.commit()
    logger.info("partylist_deleted", partylist_id=partylist_id, affected_voters=len(affected))
