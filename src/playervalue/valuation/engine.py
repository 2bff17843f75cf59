"""Weighted-score valuation.

The market value grows with the fourth power of the weighted score, so a few
points of weighted skill near the top of the scale separate players by
millions while average players stay cheap::

    value = BASE_VALUE * (score / NORMALIZATION_CONSTANT) ** EXPONENT

rounded half-up to the nearest ``ROUNDING_STEP``. The scaling runs on exact
fractions, so any finite weights give an exact integer however large. A player
whose position has no weights configured is worth 0, and attributes without a
weight are left out of the score. Neither case is an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, List, Mapping, Optional

from playervalue.catalog import AttributeCode, ordered
from playervalue.models import Player, WeightConfiguration


BASE_VALUE = 500_000
NORMALIZATION_CONSTANT = 60
EXPONENT = 4
ROUNDING_STEP = 100_000


@dataclass(frozen=True)
class PlayerValuation:
    player: Player
    weighted_score: float
    market_value: int


def weighted_score(player: Player, config: WeightConfiguration) -> Optional[float]:
    """Sum of attribute * weight for the attributes the position's weights cover.

    Returns None when ``config`` has no entry for the player's position.
    """

    weights = config.weights_for(player.position)
    if weights is None:
        return None
    score = 0.0
    # Catalog order keeps the float sum identical for equal players.
    for code in ordered(player.attributes):
        weight = weights.get(code)
        if weight:
            score += player.attributes[code] * weight
    return score


def _exact_score(player: Player, weights: Mapping[AttributeCode, float]) -> Fraction:
    score = Fraction(0)
    for code in ordered(player.attributes):
        weight = weights.get(code)
        if weight:
            score += player.attributes[code] * Fraction(weight)
    return score


def _round_to_step(raw: Fraction) -> int:
    # Half-up on the quotient; raw is never negative.
    return math.floor(raw / ROUNDING_STEP + Fraction(1, 2)) * ROUNDING_STEP


def compute_market_value(player: Player, config: WeightConfiguration) -> int:
    weights = config.weights_for(player.position)
    if weights is None:
        return 0
    score = _exact_score(player, weights)
    if not score:
        return 0
    raw = BASE_VALUE * (score / NORMALIZATION_CONSTANT) ** EXPONENT
    return _round_to_step(raw)


def value_players(players: Iterable[Player], config: WeightConfiguration) -> List[PlayerValuation]:
    """Value every player against one configuration snapshot, most valuable first."""

    valuations = [
        PlayerValuation(
            player=player,
            weighted_score=weighted_score(player, config) or 0.0,
            market_value=compute_market_value(player, config),
        )
        for player in players
    ]
    return sorted(valuations, key=lambda item: (-item.market_value, item.player.name))
