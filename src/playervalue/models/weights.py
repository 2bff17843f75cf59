"""Per-position attribute weights."""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional, Union

from pydantic import Field, RootModel, model_validator
from pydantic.config import ConfigDict

from playervalue.catalog import AttributeCode, Position, attributes_for, ordered


Weight = Annotated[float, Field(ge=0.0, allow_inf_nan=False)]


class WeightConfiguration(RootModel[Dict[Position, Dict[AttributeCode, Weight]]]):
    """Mapping of position -> attribute -> weight.

    Weights are nominally in [0, 1] but anything finite and non-negative is
    accepted. A position may cover only part of its attribute subset; the
    uncovered attributes simply do not contribute to the weighted score.
    Instances are values: the mappings are read-only views, so changes go
    through :func:`playervalue.persistence.update_weight`, which returns a new
    configuration.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_attribute_subsets(self) -> "WeightConfiguration":
        for position, weights in self.root.items():
            stray = ordered(set(weights) - attributes_for(position))
            if stray:
                codes = ", ".join(code.value for code in stray)
                raise ValueError(f"attributes {codes} are not valid for position {position.value}")
        frozen = {position: MappingProxyType(dict(weights)) for position, weights in self.root.items()}
        # frozen=True only guards attribute assignment; swap in read-only views once.
        object.__setattr__(self, "root", MappingProxyType(frozen))
        return self

    @classmethod
    def from_plain(cls, data: Mapping[str, Mapping[str, Any]]) -> "WeightConfiguration":
        return cls.model_validate(data)

    def positions(self) -> list[Position]:
        return [position for position in Position if position in self.root]

    def weights_for(self, position: Union[Position, str]) -> Optional[Mapping[AttributeCode, float]]:
        """Return the weights for ``position`` or None when it is not configured."""

        try:
            key = Position(position)
        except ValueError:
            return None
        return self.root.get(key)

    def to_plain(self) -> dict[str, dict[str, float]]:
        """Text-keyed copy in catalog order, suitable for JSON."""

        plain: dict[str, dict[str, float]] = {}
        for position in self.positions():
            weights = self.root[position]
            plain[position.value] = {code.value: float(weights[code]) for code in ordered(weights)}
        return plain

