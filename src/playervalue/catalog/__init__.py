"""Attribute and position catalog shared by models and valuation."""

from .attributes import (
    GOALKEEPER_ATTRIBUTES,
    OUTFIELD_ATTRIBUTES,
    ATTRIBUTE_ORDER,
    AttributeCode,
    Position,
    attributes_for,
    display_name,
    iter_positions,
    ordered,
)

__all__ = [
    "AttributeCode",
    "Position",
    "OUTFIELD_ATTRIBUTES",
    "GOALKEEPER_ATTRIBUTES",
    "attributes_for",
    "display_name",
    "iter_positions",
    "ordered",
    "ATTRIBUTE_ORDER",
]
