"""Main API router for v1."""
from fastapi import APIRouter

from schoolvote.api.v1.endpoints import auth, candidates, partylists, positions, settings, users, votes

api_router = APIRouter(prefix="/api/v1")

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(settings.router, prefix="/settings", tags=["Settings"])
api_router.include_router(partylists.router, prefix="/partylists", tags=["Partylists"])
api_router.include_router(positions.router, prefix="/positions", tags=["Positions"])
api_router.include_router(candidates.router, prefix="/candidates", tags=["Candidates"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(votes.router, prefix="/votes", tags=["Votes"])
