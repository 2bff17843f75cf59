import pytest
from pydantic import ValidationError

from playervalue.catalog import AttributeCode, Position
from playervalue.models import Player


def _outfield(**overrides):
    attributes = {"PAC": 89, "SHO": 96, "PAS": 65, "DRI": 80, "DEF": 45, "PHY": 94}
    attributes.update(overrides)
    return attributes


def test_player_is_frozen():
    player = Player(player_id="2", name="Erling Haaland", position="ST", attributes=_outfield())

    assert player.position is Position.ST
    assert player.attributes[AttributeCode.SHO] == 96

    with pytest.raises((TypeError, ValidationError)):
        player.name = "Someone Else"  # type: ignore[misc]


def test_integer_ids_are_coerced_to_text():
    player = Player(player_id=7, name="Keeper", position="GK",
                    attributes={"DIV": 89, "HAN": 86, "KIC": 85, "REF": 91, "SPD": 58, "POS": 89})
    assert player.player_id == "7"


def test_goalkeeper_attributes_rejected_for_outfield_player():
    attributes = _outfield()
    del attributes["PHY"]
    attributes["DIV"] = 70

    with pytest.raises(ValidationError) as excinfo:
        Player(player_id="x", name="Mixed", position="ST", attributes=attributes)
    message = str(excinfo.value)
    assert "missing PHY" in message
    assert "unexpected DIV" in message


def test_missing_attribute_rejected():
    attributes = _outfield()
    del attributes["DEF"]
    with pytest.raises(ValidationError):
        Player(player_id="x", name="Partial", position="CB", attributes=attributes)


@pytest.mark.parametrize("score", [-1, 101])
def test_attribute_scores_must_be_within_range(score):
    with pytest.raises(ValidationError):
        Player(player_id="x", name="Out Of Range", position="ST", attributes=_outfield(PAC=score))


def test_blank_name_rejected():
    with pytest.raises(ValidationError):
        Player(player_id="x", name="   ", position="ST", attributes=_outfield())
