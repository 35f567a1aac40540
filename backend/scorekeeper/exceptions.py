from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class RollRejected(DomainException):
    """A roll that is illegal for the current game state.

    Raised before any frame is touched, so the caller's snapshot is
    unchanged when this propagates.
    """

    def __init__(self, title: str, *, code: str, detail: str) -> None:
        super().__init__(status_code=400, title=title, detail=detail, code=code)


class OutOfRangeRoll(RollRejected):
    def __init__(self, pins) -> None:
        super().__init__(
            "Pins out of range",
            detail=f"pins must be between 0 and 10 (got {pins!r})",
            code="roll_out_of_range",
        )
        self.pins = pins


class FrameAlreadyComplete(RollRejected):
    def __init__(self, frame_number: int, detail: str | None = None) -> None:
        super().__init__(
            "Frame already complete",
            detail=detail or f"frame {frame_number} already complete",
            code="frame_complete",
        )
        self.frame_number = frame_number


class FrameTotalExceeded(RollRejected):
    def __init__(self, frame_number: int, detail: str | None = None) -> None:
        super().__init__(
            "Frame total exceeded",
            detail=detail or f"total pins in frame {frame_number} cannot exceed 10",
            code="frame_total_exceeded",
        )
        self.frame_number = frame_number


class ThirdRollNotEarned(RollRejected):
    def __init__(self) -> None:
        super().__init__(
            "Third roll not earned",
            detail="roll 3 is only allowed in the 10th frame after a strike or spare",
            code="third_roll_not_earned",
        )


class PlayerAlreadyFinished(RollRejected):
    def __init__(self, player_id: str | None = None) -> None:
        who = f"player '{player_id}'" if player_id else "player"
        super().__init__(
            "Player already finished",
            detail=f"{who} already finished the game",
            code="player_finished",
        )
        self.player_id = player_id


class EntityNotFound(DomainException):
    def __init__(self, title: str, *, code: str, detail: str) -> None:
        super().__init__(status_code=404, title=title, detail=detail, code=code)


class GameNotFound(EntityNotFound):
    def __init__(self, game_id: str) -> None:
        super().__init__(
            "Game not found",
            detail=f"game '{game_id}' not found",
            code="game_not_found",
        )
        self.game_id = game_id


class PlayerNotFound(EntityNotFound):
    def __init__(self, player_id: str) -> None:
        super().__init__(
            "Player not found",
            detail=f"player '{player_id}' not found in this game",
            code="player_not_found",
        )
        self.player_id = player_id


def problem_detail(exc: DomainException) -> ProblemDetail:
    """Translate a domain error into a problem document for the caller."""

    return ProblemDetail(
        type=exc.type,
        title=exc.title,
        detail=exc.detail,
        status=exc.status_code,
        code=exc.code,
    )
