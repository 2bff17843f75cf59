"""Domain models shared by valuation, persistence and the API."""

from .player import Player
from .weights import WeightConfiguration

__all__ = ["Player", "WeightConfiguration"]
