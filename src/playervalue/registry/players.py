"""Player registry: the bundled roster plus CSV loading and name search."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence, Tuple

from pydantic import ValidationError

from playervalue.catalog import AttributeCode
from playervalue.models import Player


logger = logging.getLogger(__name__)

DEFAULT_PLAYERS: Sequence[Mapping[str, object]] = (
    {"player_id": "1", "name": "Kylian Mbappé", "position": "ST",
     "attributes": {"PAC": 97, "SHO": 90, "PAS": 80, "DRI": 92, "DEF": 36, "PHY": 78}},
    {"player_id": "2", "name": "Erling Haaland", "position": "ST",
     "attributes": {"PAC": 89, "SHO": 96, "PAS": 65, "DRI": 80, "DEF": 45, "PHY": 94}},
    {"player_id": "3", "name": "Kevin De Bruyne", "position": "CAM",
     "attributes": {"PAC": 72, "SHO": 88, "PAS": 94, "DRI": 87, "DEF": 64, "PHY": 74}},
    {"player_id": "4", "name": "Jude Bellingham", "position": "CAM",
     "attributes": {"PAC": 80, "SHO": 85, "PAS": 84, "DRI": 91, "DEF": 82, "PHY": 88}},
    {"player_id": "5", "name": "Virgil van Dijk", "position": "CB",
     "attributes": {"PAC": 81, "SHO": 60, "PAS": 71, "DRI": 72, "DEF": 91, "PHY": 88}},
    {"player_id": "6", "name": "Rúben Dias", "position": "CB",
     "attributes": {"PAC": 62, "SHO": 39, "PAS": 67, "DRI": 69, "DEF": 90, "PHY": 89}},
    {"player_id": "7", "name": "Alisson Becker", "position": "GK",
     "attributes": {"DIV": 89, "HAN": 86, "KIC": 85, "REF": 91, "SPD": 58, "POS": 89}},
    {"player_id": "8", "name": "Thibaut Courtois", "position": "GK",
     "attributes": {"DIV": 85, "HAN": 89, "KIC": 76, "REF": 90, "SPD": 46, "POS": 87}},
    {"player_id": "9", "name": "Lionel Messi", "position": "CAM",
     "attributes": {"PAC": 80, "SHO": 87, "PAS": 90, "DRI": 94, "DEF": 33, "PHY": 64}},
    {"player_id": "10", "name": "Cristiano Ronaldo", "position": "ST",
     "attributes": {"PAC": 77, "SHO": 92, "PAS": 75, "DRI": 81, "DEF": 34, "PHY": 75}},
)


class PlayerRegistry:
    """Immutable, ordered collection of players indexed by id."""

    def __init__(self, players: Iterable[Player]):
        self._players: Tuple[Player, ...] = tuple(players)
        self._by_id: dict[str, Player] = {}
        for player in self._players:
            if player.player_id in self._by_id:
                raise ValueError(f"duplicate player id {player.player_id!r}")
            self._by_id[player.player_id] = player

    def all(self) -> Tuple[Player, ...]:
        return self._players

    def get(self, player_id: str | int) -> Player:
        key = str(player_id)
        if key not in self._by_id:
            raise KeyError(f"No player with id {key!r}")
        return self._by_id[key]

    def search(self, query: str | None) -> List[Player]:
        """Case-insensitive substring match on the player name."""

        needle = (query or "").strip().casefold()
        if not needle:
            return list(self._players)
        return [player for player in self._players if needle in player.name.casefold()]

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return str(player_id) in self._by_id


def default_registry() -> PlayerRegistry:
    return PlayerRegistry(Player.model_validate(row) for row in DEFAULT_PLAYERS)


def _row_to_player(row: Mapping[str, str]) -> Player:
    attributes = {}
    for code in AttributeCode:
        raw = (row.get(code.value) or "").strip()
        if raw:
            attributes[code.value] = raw
    return Player.model_validate(
        {
            "player_id": (row.get("id") or "").strip(),
            "name": row.get("name") or "",
            "position": (row.get("position") or "").strip().upper(),
            "attributes": attributes,
        }
    )


def load_players_csv(path: Path) -> PlayerRegistry:
    """Load players from a CSV with ``id,name,position`` and one column per attribute code.

    Blank attribute cells are skipped, so a goalkeeper row leaves the outfield
    columns empty and vice versa. Invalid rows raise ValueError naming the line.
    """

    players: list[Player] = []
    with Path(path).open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, start=2):
            try:
                players.append(_row_to_player(row))
            except ValidationError as exc:
                raise ValueError(f"{path}:{line_no}: invalid player row: {exc}") from exc
    logger.info("Loaded %d players from %s", len(players), path)
    return PlayerRegistry(players)
