from __future__ import annotations

from pydantic import BaseModel, Field


class WeightsPayload(BaseModel):
    weights: dict[str, dict[str, float]] = Field(default_factory=dict)


class WeightsResponse(BaseModel):
    weights: dict[str, dict[str, float]]


class WeightUpdate(BaseModel):
    value: float
