"""REST API over the player registry and the weight configuration."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import ValidationError

from playervalue.api.schemas import (
    CatalogAttributeResponse,
    CatalogPositionResponse,
    PlayerResponse,
    WeightsPayload,
    WeightsResponse,
    WeightUpdate,
)
from playervalue.catalog import attributes_for, display_name, iter_positions, ordered
from playervalue.errors import PersistFailure
from playervalue.models import Player, WeightConfiguration
from playervalue.persistence import ConfigStore, SQLiteSnapshotBackend
from playervalue.registry import PlayerRegistry, default_registry, load_players_csv
from playervalue.session import ValuationSession
from playervalue.settings import load_settings
from playervalue.valuation import compute_market_value, weighted_score


logger = logging.getLogger(__name__)


def _player_response(player: Player, config: WeightConfiguration) -> PlayerResponse:
    return PlayerResponse(
        player_id=player.player_id,
        name=player.name,
        position=player.position.value,
        attributes={code.value: player.attributes[code] for code in ordered(player.attributes)},
        weighted_score=weighted_score(player, config) or 0.0,
        market_value=compute_market_value(player, config),
    )


def _weights_response(config: WeightConfiguration) -> WeightsResponse:
    return WeightsResponse(weights=config.to_plain())


def _save(session: ValuationSession) -> WeightsResponse:
    try:
        committed = session.save()
    except PersistFailure as exc:
        logger.warning("Weight configuration not saved: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return _weights_response(committed)


def create_app(
    store: Optional[ConfigStore] = None,
    registry: Optional[PlayerRegistry] = None,
) -> FastAPI:
    app = FastAPI(title="playervalue")
    if store is None or registry is None:
        settings = load_settings()
        if store is None:
            store = ConfigStore(SQLiteSnapshotBackend(settings.db_path))
        if registry is None:
            registry = load_players_csv(settings.players_csv) if settings.players_csv else default_registry()
    session = ValuationSession(store)
    app.state.session = session
    app.state.registry = registry

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/catalog", response_model=list[CatalogPositionResponse])
    async def catalog() -> list[CatalogPositionResponse]:
        return [
            CatalogPositionResponse(
                position=position.value,
                attributes=[
                    CatalogAttributeResponse(code=code.value, name=display_name(code))
                    for code in ordered(attributes_for(position))
                ],
            )
            for position in iter_positions()
        ]

    @app.get("/players", response_model=list[PlayerResponse])
    async def list_players(q: str | None = Query(None, description="Case-insensitive name filter")) -> list[PlayerResponse]:
        config = session.committed
        return [_player_response(player, config) for player in registry.search(q)]

    @app.get("/players/{player_id}", response_model=PlayerResponse)
    async def get_player(player_id: str) -> PlayerResponse:
        try:
            player = registry.get(player_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"player {player_id} not found") from exc
        return _player_response(player, session.committed)

    @app.get("/weights", response_model=WeightsResponse)
    async def get_weights() -> WeightsResponse:
        return _weights_response(session.committed)

    @app.put("/weights", response_model=WeightsResponse)
    async def put_weights(payload: WeightsPayload) -> WeightsResponse:
        try:
            config = WeightConfiguration.from_plain(payload.weights)
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        if not config.root:
            raise HTTPException(status_code=422, detail="weights must configure at least one position")
        session.replace_draft(config)
        return _save(session)

    @app.patch("/weights/{position}/{attribute}", response_model=WeightsResponse)
    async def patch_weight(position: str, attribute: str, payload: WeightUpdate) -> WeightsResponse:
        try:
            session.set_weight(position.upper(), attribute.upper(), payload.value)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _save(session)

    @app.post("/weights/reset", response_model=WeightsResponse)
    async def reset_weights() -> WeightsResponse:
        session.reset_draft()
        return _save(session)

    return app
