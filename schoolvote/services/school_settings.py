"""School settings business logic."""
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy.orm import Session

from schoolvote.core import config
from schoolvote.core.constants import (
    DEFAULT_ELECTION_STATUS,
    ELECTION_STATUS_ACTIVE,
    ELECTION_STATUS_SCHEDULED,
)
from schoolvote.core.exceptions import ValidationError
from schoolvote.core.logging_config import get_logger
from schoolvote.core.utils import is_within_window, to_utc
from schoolvote.db.models import SchoolSettings
from schoolvote.services.utils import apply_changes

logger = get_logger(__name__)


def get_saved_school_settings(db: Session) -> Optional[SchoolSettings]:
    """Return the singleton settings row, or None if an admin never saved one."""
    return db.query(SchoolSettings).order_by(SchoolSettings.id).first()


def get_school_settings(db: Session) -> SchoolSettings:
    """Return the saved settings, or an unsaved default instance."""
    saved = get_saved_school_settings(db)
    if saved:
        return saved
    return SchoolSettings(
        school_name=config.settings.DEFAULT_SCHOOL_NAME,
        election_title=config.settings.DEFAULT_ELECTION_TITLE,
        election_status=DEFAULT_ELECTION_STATUS,
    )


def update_school_settings(db: Session, changes: Dict) -> SchoolSettings:
    """
    Create or partially update the settings singleton.

    Raises:
        ValidationError: If the resulting voting window ends before it starts
    """
    row = get_school_settings(db)

    start = changes.get("start_date", row.start_date)
    end = changes.get("end_date", row.end_date)
    if start is not None and end is not None and to_utc(end) <= to_utc(start):
        raise ValidationError("End date must be after start date")

    if row.id is None:
        db.add(row)
    apply_changes(row, changes)
    db.commit()
    db.refresh(row)

    logger.info("school_settings_updated", fields=sorted(changes), election_status=row.election_status)
    return row


def is_election_open(db: Session, now: Optional[datetime] = None) -> bool:
    """
    Whether ballots may be cast right now.

    Without a saved settings row the election is not gated. An active
    election is open inside its optional window. A scheduled election
    behaves the same but stays closed until a window is configured.
    """
    row = get_saved_school_settings(db)
    if row is None:
        return True
    if row.election_status == ELECTION_STATUS_SCHEDULED:
        if row.start_date is None and row.end_date is None:
            return False
    elif row.election_status != ELECTION_STATUS_ACTIVE:
        return False
    return is_within_window(row.start_date, row.end_date, now)
