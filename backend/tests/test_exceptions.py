import pytest

from scorekeeper.exceptions import (
    DomainException,
    EntityNotFound,
    FrameAlreadyComplete,
    FrameTotalExceeded,
    GameNotFound,
    OutOfRangeRoll,
    PlayerAlreadyFinished,
    PlayerNotFound,
    RollRejected,
    ThirdRollNotEarned,
    problem_detail,
)


@pytest.mark.parametrize(
    "exc, code",
    [
        (OutOfRangeRoll(11), "roll_out_of_range"),
        (FrameAlreadyComplete(3), "frame_complete"),
        (FrameTotalExceeded(3), "frame_total_exceeded"),
        (ThirdRollNotEarned(), "third_roll_not_earned"),
        (PlayerAlreadyFinished("p1"), "player_finished"),
    ],
    ids=["out-of-range", "complete", "total", "third-roll", "finished"],
)
def test_roll_rejections_are_bad_requests(exc, code):
    assert isinstance(exc, RollRejected)
    assert exc.status_code == 400
    assert exc.code == code
    assert exc.detail


@pytest.mark.parametrize(
    "exc, code",
    [(GameNotFound("g1"), "game_not_found"), (PlayerNotFound("p1"), "player_not_found")],
    ids=["game", "player"],
)
def test_missing_entities_are_not_found(exc, code):
    assert isinstance(exc, EntityNotFound)
    assert exc.status_code == 404
    assert exc.code == code


def test_problem_detail_from_domain_exception():
    problem = problem_detail(PlayerNotFound("p1"))
    assert problem.model_dump() == {
        "type": "about:blank",
        "title": "Player not found",
        "detail": "player 'p1' not found in this game",
        "status": 404,
        "instance": None,
        "code": "player_not_found",
    }


def test_domain_exception_message_falls_back_to_title():
    exc = DomainException(409, "Conflict", code="conflict")
    assert str(exc) == "Conflict"
    assert "11" in str(OutOfRangeRoll(11))
