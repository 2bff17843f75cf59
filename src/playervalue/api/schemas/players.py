from __future__ import annotations

from pydantic import BaseModel, Field


class PlayerResponse(BaseModel):
    player_id: str
    name: str
    position: str
    attributes: dict[str, int]
    weighted_score: float = Field(..., ge=0.0)
    market_value: int = Field(..., ge=0)
