"""Market-value calculation from weighted attribute scores."""

from .engine import (
    BASE_VALUE,
    EXPONENT,
    NORMALIZATION_CONSTANT,
    ROUNDING_STEP,
    PlayerValuation,
    compute_market_value,
    value_players,
    weighted_score,
)

__all__ = [
    "BASE_VALUE",
    "EXPONENT",
    "NORMALIZATION_CONSTANT",
    "ROUNDING_STEP",
    "PlayerValuation",
    "compute_market_value",
    "value_players",
    "weighted_score",
]
