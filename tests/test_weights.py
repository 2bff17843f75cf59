import json
import logging

import pytest
from pydantic import ValidationError

from playervalue.catalog import AttributeCode, Position
from playervalue.errors import RestoreFailure
from playervalue.models import WeightConfiguration
from playervalue.persistence import (
    DEFAULT_WEIGHTS,
    load_default,
    reset_to_default,
    restore,
    serialize,
    update_weight,
)


def test_default_covers_every_position():
    config = load_default()
    assert config.positions() == list(Position)
    assert config.weights_for("ST")[AttributeCode.SHO] == pytest.approx(0.35)


def test_default_weights_are_used_as_given():
    config = load_default()
    totals = {position.value: sum(config.weights_for(position).values()) for position in config.positions()}
    assert totals["CB"] == pytest.approx(1.0)
    assert totals["ST"] == pytest.approx(1.0)
    assert set(totals) == set(DEFAULT_WEIGHTS)


def test_configuration_cannot_be_edited_in_place():
    config = load_default()

    with pytest.raises(TypeError):
        config.weights_for("ST")[AttributeCode.PAC] = 9.0  # type: ignore[index]
    with pytest.raises(TypeError):
        config.root[Position.ST] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        del config.root[Position.GK][AttributeCode.REF]  # type: ignore[attr-defined]

    assert config == load_default()
    assert config.weights_for("ST")[AttributeCode.PAC] == pytest.approx(0.25)


def test_reset_to_default_matches_default():
    assert reset_to_default() == load_default()


def test_update_weight_does_not_mutate_input():
    original = load_default()
    snapshot = original.to_plain()

    updated = update_weight(original, "ST", "SHO", 0.8)

    assert original.to_plain() == snapshot
    assert updated.weights_for("ST")[AttributeCode.SHO] == pytest.approx(0.8)
    changed = updated.to_plain()
    changed["ST"]["SHO"] = snapshot["ST"]["SHO"]
    assert changed == snapshot


def test_update_weight_adds_missing_position():
    config = WeightConfiguration.from_plain({"ST": {"SHO": 0.5}})
    updated = update_weight(config, Position.GK, AttributeCode.REF, 0.3)
    assert updated.positions() == [Position.ST, Position.GK]
    assert config.weights_for("GK") is None


def test_update_weight_does_not_clamp():
    updated = update_weight(load_default(), "CB", "DEF", 1.5)
    assert updated.weights_for("CB")[AttributeCode.DEF] == pytest.approx(1.5)


@pytest.mark.parametrize(
    "position, attribute, value",
    [
        ("GK", "PAC", 0.5),
        ("ST", "SHO", -0.1),
        ("ST", "SHO", float("nan")),
    ],
)
def test_update_weight_rejects_invalid_values(position, attribute, value):
    with pytest.raises(ValidationError):
        update_weight(load_default(), position, attribute, value)


def test_update_weight_rejects_unknown_codes():
    with pytest.raises(ValueError):
        update_weight(load_default(), "LW", "PAC", 0.5)
    with pytest.raises(ValueError):
        update_weight(load_default(), "ST", "XYZ", 0.5)


def test_serialize_is_text_keyed_json():
    data = json.loads(serialize(load_default()))
    assert data["GK"]["REF"] == pytest.approx(0.25)


def test_restore_round_trip():
    config = update_weight(load_default(), "CAM", "PAS", 1 / 3)
    assert restore(serialize(config)) == config
    assert restore(serialize(load_default())) == load_default()


@pytest.mark.parametrize(
    "snapshot",
    [
        None,
        "",
        "not json",
        "{}",
        "null",
        "[]",
        "42",
        '{"ST": 5}',
        '{"ST": {"PAC": "fast"}}',
        '{"ST": {"PAC": -1}}',
        '{"ST": {"PAC": NaN}}',
        '{"LW": {"PAC": 0.3}}',
    ],
)
def test_restore_rejects_garbage(snapshot):
    with pytest.raises(RestoreFailure):
        restore(snapshot)


@pytest.mark.parametrize("opening", ["[", '{"ST":'], ids=["array", "object"])
def test_restore_rejects_deeply_nested_json(opening):
    with pytest.raises(RestoreFailure):
        restore(opening * 200_000)


def test_restore_failure_is_a_value_error():
    with pytest.raises(ValueError):
        restore("not json")


def test_restore_drops_stale_keys(caplog):
    snapshot = json.dumps(
        {
            "ST": {"PAC": 0.5, "XYZ": 1.0, "DIV": 0.3},
            "LW": {"PAC": 0.2},
        }
    )
    with caplog.at_level(logging.WARNING, logger="playervalue.persistence.weights"):
        config = restore(snapshot)

    assert config.to_plain() == {"ST": {"PAC": 0.5}}
    assert "LW" in caplog.text
    assert "XYZ" in caplog.text
