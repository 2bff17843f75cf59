"""Default weights plus the pure operations on weight configurations."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from playervalue.catalog import AttributeCode, Position, attributes_for
from playervalue.errors import RestoreFailure
from playervalue.models import WeightConfiguration


logger = logging.getLogger(__name__)

# Used as given: nothing rescales a position to sum to 1.
DEFAULT_WEIGHTS: Mapping[str, Mapping[str, float]] = {
    "ST": {"PAC": 0.25, "SHO": 0.35, "PAS": 0.05, "DRI": 0.15, "DEF": 0.05, "PHY": 0.15},
    "CAM": {"PAC": 0.15, "SHO": 0.20, "PAS": 0.30, "DRI": 0.25, "DEF": 0.05, "PHY": 0.05},
    "CB": {"PAC": 0.10, "SHO": 0.05, "PAS": 0.10, "DRI": 0.10, "DEF": 0.40, "PHY": 0.25},
    "GK": {"DIV": 0.20, "HAN": 0.20, "KIC": 0.10, "REF": 0.25, "SPD": 0.05, "POS": 0.20},
}


def load_default() -> WeightConfiguration:
    """Return a fresh copy of the built-in configuration."""

    return WeightConfiguration.from_plain(DEFAULT_WEIGHTS)


def reset_to_default() -> WeightConfiguration:
    return load_default()


def update_weight(
    config: WeightConfiguration,
    position: Union[Position, str],
    attribute: Union[AttributeCode, str],
    value: float,
) -> WeightConfiguration:
    """Return a copy of ``config`` with one weight replaced.

    The position entry is created when missing. No range clamping happens
    here; the new configuration is validated like any other, so a negative
    weight or an attribute outside the position's subset raises ValueError.
    """

    position = Position(position)
    attribute = AttributeCode(attribute)
    updated = {pos: dict(weights) for pos, weights in config.root.items()}
    updated.setdefault(position, {})[attribute] = value
    return WeightConfiguration.model_validate(updated)


def serialize(config: WeightConfiguration) -> str:
    return json.dumps(config.to_plain())


def _drop_stale_keys(data: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    cleaned: dict[str, dict[str, Any]] = {}
    for raw_position, raw_weights in data.items():
        try:
            position = Position(raw_position)
        except ValueError:
            logger.warning("Ignoring unknown position %r in weight snapshot", raw_position)
            continue
        if not isinstance(raw_weights, dict):
            raise RestoreFailure(f"weights for position {position.value} must be an object")
        allowed = {code.value for code in attributes_for(position)}
        weights: dict[str, Any] = {}
        for raw_attribute, weight in raw_weights.items():
            if raw_attribute not in allowed:
                logger.warning(
                    "Ignoring attribute %r for position %s in weight snapshot",
                    raw_attribute,
                    position.value,
                )
                continue
            weights[raw_attribute] = weight
        cleaned[position.value] = weights
    return cleaned


def restore(snapshot: Optional[str]) -> WeightConfiguration:
    """Parse a snapshot produced by :func:`serialize`.

    Raises RestoreFailure when the snapshot is empty, not JSON, not a
    non-empty object, or holds invalid weights. Positions and attributes the
    catalog no longer knows are dropped rather than rejected.
    """

    if not snapshot:
        raise RestoreFailure("no weight snapshot stored")
    try:
        data = json.loads(snapshot)
    except (TypeError, ValueError, RecursionError) as exc:
        raise RestoreFailure(f"weight snapshot is not valid JSON: {exc}") from exc
    if not isinstance(data, dict) or not data:
        raise RestoreFailure("weight snapshot must be a non-empty JSON object")

    cleaned = _drop_stale_keys(data)
    if not cleaned:
        raise RestoreFailure("weight snapshot has no known positions")
    try:
        return WeightConfiguration.model_validate(cleaned)
    except ValidationError as exc:
        raise RestoreFailure(f"weight snapshot is invalid: {exc}") from exc
