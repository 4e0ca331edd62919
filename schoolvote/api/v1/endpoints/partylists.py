"""Partylist endpoints."""
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from schoolvote.api.deps import get_db, require_admin
from schoolvote.schemas import PartylistCreate, PartylistResponse, PartylistUpdate
from schoolvote.services.partylists import (
    create_partylist,
    delete_partylist,
    get_all_partylists,
    update_partylist,
)
from schoolvote.services.utils import get_or_404
from schoolvote.db.models import Partylist

router = APIRouter()


@router.get("", response_model=List[PartylistResponse])
async def list_partylists(db: Session = Depends(get_db)):
    return get_all_partylists(db)


@router.get("/{partylist_id}", response_model=PartylistResponse)
async def read_partylist(partylist_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Partylist, partylist_id, "Partylist")


@router.post("", response_model=PartylistResponse, status_code=201, dependencies=[Depends(require_admin)])
async def create_partylist_endpoint(partylist: PartylistCreate, db: Session = Depends(get_db)):
    """Create a partylist (admin only)."""
    return create_partylist(db, **partylist.model_dump())


@router.put("/{partylist_id}", response_model=PartylistResponse, dependencies=[Depends(require_admin)])
async def update_partylist_endpoint(
    partylist_id: int,
    changes: PartylistUpdate,
    db: Session = Depends(get_db)
):
    return update_partylist(db, partylist_id, changes.model_dump(exclude_unset=True))


@router.delete("/{partylist_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_partylist_endpoint(partylist_id: int, db: Session = Depends(get_db)):
    """
    Delete a partylist (admin only).

    Its candidates and every vote cast for them are deleted too; students
    left without any vote get ``hasVoted`` cleared.
    """
    delete_partylist(db, partylist_id)
    return Response(status_code=204)
