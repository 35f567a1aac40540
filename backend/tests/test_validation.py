import pytest
from scorekeeper.exceptions import DomainException, OutOfRangeRoll, problem_detail
from scorekeeper.services.validation import (
    ValidationError,
    clean_player_names,
    validate_pins,
)


@pytest.mark.parametrize("pins, expected", [(0, 0), (10, 10), ("7", 7), (4.0, 4)])
def test_accepts_valid_pins(pins, expected) -> None:
    assert validate_pins(pins) == expected


@pytest.mark.parametrize("pins", [11, -1, "12"], ids=["eleven", "negative", "string"])
def test_rejects_out_of_range_pins(pins) -> None:
    with pytest.raises(OutOfRangeRoll) as exc:
        validate_pins(pins)
    assert exc.value.code == "roll_out_of_range"


@pytest.mark.parametrize(
    "pins, msg",
    [
        (True, "not a boolean"),
        ("x", "integer"),
        (None, "integer"),
        (2.5, "whole number"),
    ],
    ids=["boolean", "non-numeric", "none", "fraction"],
)
def test_rejects_malformed_pins(pins, msg) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_pins(pins)
    assert msg.lower() in str(exc.value).lower()


def test_cleans_player_names() -> None:
    assert clean_player_names([" Ann ", "", None, "Bo"], max_players=4) == ["Ann", "Bo"]


@pytest.mark.parametrize(
    "names, msg",
    [
        ([], "At least 1 player"),
        ("Ann", "At least 1 player"),
        (["a", "b", "c"], "Maximum of 2"),
        ([" "], "cannot be empty"),
        ([42], "must be strings"),
    ],
    ids=["empty", "bare-string", "too-many", "blank", "non-string"],
)
def test_rejects_invalid_player_names(names, msg) -> None:
    with pytest.raises(ValidationError) as exc:
        clean_player_names(names, max_players=2)
    assert msg.lower() in str(exc.value).lower()


def test_validation_error_translates_to_problem() -> None:
    with pytest.raises(ValidationError) as exc:
        validate_pins("x")
    assert isinstance(exc.value, DomainException)
    problem = problem_detail(exc.value)
    assert problem.status == 400
    assert problem.code == "invalid_input"
    assert problem.detail == "Pins must be an integer."
