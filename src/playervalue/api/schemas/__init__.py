"""Pydantic models for API I/O."""

from .catalog import CatalogAttributeResponse, CatalogPositionResponse
from .players import PlayerResponse
from .weights import WeightsPayload, WeightsResponse, WeightUpdate

__all__ = [
    "CatalogAttributeResponse",
    "CatalogPositionResponse",
    "PlayerResponse",
    "WeightsPayload",
    "WeightsResponse",
    "WeightUpdate",
]
