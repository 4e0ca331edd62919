"""School settings endpoints."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from schoolvote.api.deps import get_db, require_admin
from schoolvote.schemas import SchoolSettingsResponse, SchoolSettingsUpdate
from schoolvote.services.school_settings import get_school_settings, is_election_open, update_school_settings

logger = logging.getLogger(__name__)
router = APIRouter()


def _to_response(db: Session, row) -> SchoolSettingsResponse:
    response = SchoolSettingsResponse.model_validate(row)
    response.voting_open = is_election_open(db)
    return response


@router.get("", response_model=SchoolSettingsResponse)
async def read_settings(db: Session = Depends(get_db)):
    """
    Public school branding and election status.

    Returns configured defaults until an admin saves settings. ``votingOpen``
    tells the client whether ballots are accepted right now.
    """
    return _to_response(db, get_school_settings(db))


@router.put("", response_model=SchoolSettingsResponse, dependencies=[Depends(require_admin)])
async def write_settings(changes: SchoolSettingsUpdate, db: Session = Depends(get_db)):
    """
    Update school settings (admin only).

    Partial: omitted fields keep their value. Dates accept ISO 8601; an empty
    string clears a date. ``logo1``/``logo2`` are stored as opaque references.

    Raises:
        400 if endDate is not after startDate
        403 if the session user is not an admin
    """
    row = update_school_settings(db, changes.model_dump(exclude_unset=True))
    logger.info(f"School settings updated (status={row.election_status})")
    return _to_response(db, row)
