"""Player reference data."""

from .players import DEFAULT_PLAYERS, PlayerRegistry, default_registry, load_players_csv

__all__ = ["DEFAULT_PLAYERS", "PlayerRegistry", "default_registry", "load_players_csv"]
