"""Position endpoints."""
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from schoolvote.api.deps import get_db, require_admin
from schoolvote.db.models import Position
from schoolvote.schemas import PositionCreate, PositionResponse, PositionUpdate
from schoolvote.services.positions import create_position, delete_position, get_all_positions, update_position
from schoolvote.services.utils import get_or_404

router = APIRouter()


@router.get("", response_model=List[PositionResponse])
async def list_positions(db: Session = Depends(get_db)):
    """All positions in ballot (display) order."""
    return get_all_positions(db)


@router.get("/{position_id}", response_model=PositionResponse)
async def read_position(position_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Position, position_id, "Position")


@router.post("", response_model=PositionResponse, status_code=201, dependencies=[Depends(require_admin)])
async def create_position_endpoint(position: PositionCreate, db: Session = Depends(get_db)):
    """
    Create a position (admin only).

    ``maxVotes`` is stored for display; each student still casts exactly one
    vote per position.
    """
    return create_position(db, **position.model_dump())


@router.put("/{position_id}", response_model=PositionResponse, dependencies=[Depends(require_admin)])
async def update_position_endpoint(
    position_id: int,
    changes: PositionUpdate,
    db: Session = Depends(get_db)
):
    return update_position(db, position_id, changes.model_dump(exclude_unset=True))


@router.delete("/{position_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_position_endpoint(position_id: int, db: Session = Depends(get_db)):
    """Delete a position with its candidates and votes (admin only)."""
    delete_position(db, position_id)
    return Response(status_code=204)
