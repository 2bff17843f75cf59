"""Attribute codes, positions and the attribute subset each position uses."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Union


class AttributeCode(str, Enum):
    PAC = "PAC"
    SHO = "SHO"
    PAS = "PAS"
    DRI = "DRI"
    DEF = "DEF"
    PHY = "PHY"
    DIV = "DIV"
    HAN = "HAN"
    KIC = "KIC"
    REF = "REF"
    SPD = "SPD"
    POS = "POS"


class Position(str, Enum):
    ST = "ST"
    CAM = "CAM"
    CB = "CB"
    GK = "GK"


OUTFIELD_ATTRIBUTES: FrozenSet[AttributeCode] = frozenset(
    {
        AttributeCode.PAC,
        AttributeCode.SHO,
        AttributeCode.PAS,
        AttributeCode.DRI,
        AttributeCode.DEF,
        AttributeCode.PHY,
    }
)

GOALKEEPER_ATTRIBUTES: FrozenSet[AttributeCode] = frozenset(
    {
        AttributeCode.DIV,
        AttributeCode.HAN,
        AttributeCode.KIC,
        AttributeCode.REF,
        AttributeCode.SPD,
        AttributeCode.POS,
    }
)

_DISPLAY_NAMES: Dict[AttributeCode, str] = {
    AttributeCode.PAC: "Pace",
    AttributeCode.SHO: "Shooting",
    AttributeCode.PAS: "Passing",
    AttributeCode.DRI: "Dribbling",
    AttributeCode.DEF: "Defending",
    AttributeCode.PHY: "Physical",
    AttributeCode.DIV: "Diving",
    AttributeCode.HAN: "Handling",
    AttributeCode.KIC: "Kicking (GK)",
    AttributeCode.REF: "Reflexes",
    AttributeCode.SPD: "Speed (GK)",
    AttributeCode.POS: "Positioning",
}

_POSITION_ATTRIBUTES: Dict[Position, FrozenSet[AttributeCode]] = {
    Position.ST: OUTFIELD_ATTRIBUTES,
    Position.CAM: OUTFIELD_ATTRIBUTES,
    Position.CB: OUTFIELD_ATTRIBUTES,
    Position.GK: GOALKEEPER_ATTRIBUTES,
}

# Catalog order for listings; enum declaration order is the display order.
ATTRIBUTE_ORDER: tuple[AttributeCode, ...] = tuple(AttributeCode)


def iter_positions() -> Iterable[Position]:
    """Return the configured positions in catalog order."""

    return iter(Position)


def attributes_for(position: Union[Position, str]) -> FrozenSet[AttributeCode]:
    """Return the attribute subset valid for ``position``.

    Raises ValueError for an unknown position code.
    """

    return _POSITION_ATTRIBUTES[Position(position)]


def display_name(code: Union[AttributeCode, str]) -> str:
    return _DISPLAY_NAMES[AttributeCode(code)]


def ordered(codes: Iterable[AttributeCode]) -> list[AttributeCode]:
    """Sort attribute codes into catalog order."""

    wanted = set(codes)
    return [code for code in ATTRIBUTE_ORDER if code in wanted]

