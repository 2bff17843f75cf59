"""Canonical player model consumed by the valuation engine."""

from __future__ import annotations

from typing import Annotated, Any, Dict

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from playervalue.catalog import AttributeCode, Position, attributes_for, ordered


AttributeScore = Annotated[int, Field(ge=0, le=100)]


class Player(BaseModel):
    """Immutable player reference record.

    The attribute keys must be exactly the subset the catalog assigns to the
    player's position: outfield players carry outfield attributes only and
    goalkeepers carry goalkeeper attributes only.
    """

    player_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    position: Position
    attributes: Dict[AttributeCode, AttributeScore]

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("player_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def _check_attribute_set(self) -> "Player":
        expected = attributes_for(self.position)
        present = set(self.attributes)
        missing = ordered(expected - present)
        extra = ordered(present - expected)
        if missing or extra:
            parts = []
            if missing:
                parts.append("missing " + ", ".join(code.value for code in missing))
            if extra:
                parts.append("unexpected " + ", ".join(code.value for code in extra))
            raise ValueError(
                f"attributes for position {self.position.value} are invalid: " + "; ".join(parts)
            )
        return self
