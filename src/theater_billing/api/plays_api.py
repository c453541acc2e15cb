"""
Plays API - FastAPI router for the play catalog.
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..engine import PricingEngine, PlayNotFoundError
from .state import get_engine

router = APIRouter(prefix="/plays", tags=["plays"])


class PlayResponse(BaseModel):
    """Response model for a play."""
    play_id: str
    name: str
    type: str


@router.get("", response_model=list[PlayResponse])
async def list_plays(engine: PricingEngine = Depends(get_engine)):
    """List all plays in the catalog."""
    return [PlayResponse(**play.__dict__) for play in engine.list_plays()]


@router.get("/{play_id}", response_model=PlayResponse)
async def get_play(play_id: str, engine: PricingEngine = Depends(get_engine)):
    """Get a single play by ID."""
    try:
        play = engine.get_play(play_id)
    except PlayNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return PlayResponse(**play.__dict__)


@router.post("/reload")
async def reload_plays(engine: PricingEngine = Depends(get_engine)):
    """Reload the play catalog from disk."""
    engine.reload_data()
    return {"success": True, "plays_count": len(engine.plays)}
