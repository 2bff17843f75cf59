"""Command-line interface for valuing players and tuning weights."""

from __future__ import annotations

import argparse
import json
import logging
import sqlite3
import sys
from pathlib import Path
from typing import Optional, Sequence

from playervalue.catalog import display_name, ordered
from playervalue.errors import PersistFailure
from playervalue.persistence import ConfigStore, SQLiteSnapshotBackend
from playervalue.registry import PlayerRegistry, default_registry, load_players_csv
from playervalue.session import ValuationSession
from playervalue.settings import load_settings
from playervalue.valuation import compute_market_value, value_players, weighted_score


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate player market values from weighted attributes")
    parser.add_argument("--db", default=None, help="SQLite path (or file: URI) holding saved weights")
    parser.add_argument("--players-csv", type=Path, default=None, help="Player CSV replacing the bundled list")
    sub = parser.add_subparsers(dest="command", required=True)

    players = sub.add_parser("players", help="List players with their market value")
    players.add_argument("--search", default=None, help="Case-insensitive name filter")

    value = sub.add_parser("value", help="Show one player's attributes and market value")
    value.add_argument("player_id")

    weights = sub.add_parser("weights", help="Show or change attribute weights")
    weights_sub = weights.add_subparsers(dest="weights_command", required=True)
    show = weights_sub.add_parser("show", help="Print the active weights")
    show.add_argument("--json", action="store_true", help="Print the raw JSON snapshot")
    set_cmd = weights_sub.add_parser("set", help="Set one weight and save")
    set_cmd.add_argument("position")
    set_cmd.add_argument("attribute")
    set_cmd.add_argument("value", type=float)
    weights_sub.add_parser("reset", help="Restore and save the default weights")

    serve = sub.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def _format_value(value: int) -> str:
    return f"€{value:,}"


def _open(args: argparse.Namespace) -> tuple[ConfigStore, PlayerRegistry]:
    settings = load_settings()
    csv_path = args.players_csv or settings.players_csv
    registry = load_players_csv(csv_path) if csv_path else default_registry()
    store = ConfigStore(SQLiteSnapshotBackend(args.db or settings.db_path))
    return store, registry


def _cmd_players(args: argparse.Namespace, session: ValuationSession, registry: PlayerRegistry) -> int:
    matches = registry.search(args.search)
    if not matches:
        print(f"No players match {args.search!r}")
        return 0
    for item in value_players(matches, session.committed):
        player = item.player
        print(f"{player.player_id:>4}  {player.name:<24} {player.position.value:<4} {_format_value(item.market_value):>14}")
    return 0


def _cmd_value(args: argparse.Namespace, session: ValuationSession, registry: PlayerRegistry) -> int:
    try:
        player = registry.get(args.player_id)
    except KeyError:
        print(f"Player {args.player_id} not found", file=sys.stderr)
        return 1
    config = session.committed
    print(f"{player.name} ({player.position.value})")
    for code in ordered(player.attributes):
        print(f"  {display_name(code):<16} {player.attributes[code]:>3}")
    score = weighted_score(player, config)
    print(f"Weighted score: {score:.2f}" if score is not None else "Weighted score: n/a")
    print(f"Market value:   {_format_value(compute_market_value(player, config))}")
    return 0


def _print_weights(session: ValuationSession) -> None:
    for position, weights in session.committed.to_plain().items():
        cells = "  ".join(f"{code}={weight * 100:.0f}%" for code, weight in weights.items())
        print(f"{position:<4} {cells}")


def _save(session: ValuationSession) -> int:
    try:
        session.save()
    except PersistFailure as exc:
        print(f"Weights not saved: {exc}", file=sys.stderr)
        return 1
    _print_weights(session)
    return 0


def _cmd_weights(args: argparse.Namespace, session: ValuationSession, registry: PlayerRegistry) -> int:
    if args.weights_command == "show":
        if args.json:
            print(json.dumps(session.committed.to_plain(), indent=2))
        else:
            _print_weights(session)
        return 0
    if args.weights_command == "set":
        try:
            session.set_weight(args.position.upper(), args.attribute.upper(), args.value)
        except ValueError as exc:
            print(f"Invalid weight: {exc}", file=sys.stderr)
            return 2
        return _save(session)
    session.reset_draft()
    return _save(session)


def _cmd_serve(args: argparse.Namespace, store: ConfigStore, registry: PlayerRegistry) -> int:
    import uvicorn

    from playervalue.api import create_app

    app = create_app(store=store, registry=registry)
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=load_settings().log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        store, registry = _open(args)
    except (OSError, ValueError, sqlite3.Error) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    if args.command == "serve":
        return _cmd_serve(args, store, registry)

    session = ValuationSession(store)
    handlers = {
        "players": _cmd_players,
        "value": _cmd_value,
        "weights": _cmd_weights,
    }
    return handlers[args.command](args, session, registry)


if __name__ == "__main__":
    raise SystemExit(main())
