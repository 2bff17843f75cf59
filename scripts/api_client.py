"""Lightweight REST client for the playervalue API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_weights(path: Path) -> dict[str, dict[str, float]]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid weights JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the playervalue REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--search", default=None, help="List players whose name contains this text")
    parser.add_argument("--player", metavar="PLAYER_ID", help="Fetch one player and exit")
    parser.add_argument("--show-weights", action="store_true", help="Print the active weights")
    parser.add_argument("--upload-weights", type=Path, help="Replace the weights with a JSON file")
    parser.add_argument(
        "--set-weight",
        nargs=3,
        metavar=("POSITION", "ATTRIBUTE", "VALUE"),
        help="Set a single weight, e.g. ST SHO 0.4",
    )
    parser.add_argument("--reset-weights", action="store_true", help="Restore the default weights")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.player:
            resp = client.get(f"/players/{args.player}")
            if resp.status_code == 404:
                raise SystemExit(f"player {args.player} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.upload_weights:
            resp = client.put("/weights", json={"weights": load_weights(args.upload_weights)})
        elif args.set_weight:
            position, attribute, value = args.set_weight
            resp = client.patch(f"/weights/{position}/{attribute}", json={"value": float(value)})
        elif args.reset_weights:
            resp = client.post("/weights/reset")
        elif args.show_weights:
            resp = client.get("/weights")
        else:
            params = {"q": args.search} if args.search else None
            resp = client.get("/players", params=params)
            resp.raise_for_status()
            for player in resp.json():
                print(f"{player['name']:<24} {player['position']:<4} {player['market_value']:>12,}")
            return

        if resp.status_code == 503:
            raise SystemExit(f"weights not saved: {resp.json()['detail']}")
        resp.raise_for_status()
        print(json.dumps(resp.json()["weights"], indent=2))


if __name__ == "__main__":
    main()
