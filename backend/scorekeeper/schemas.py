from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

FRAME_COUNT = 10
PIN_COUNT = 10


class Frame(BaseModel):
    frame_number: int = Field(..., ge=1, le=FRAME_COUNT, alias="frameNumber")
    roll1: Optional[int] = Field(default=None, ge=0, le=PIN_COUNT)
    roll2: Optional[int] = Field(default=None, ge=0, le=PIN_COUNT)
    roll3: Optional[int] = Field(default=None, ge=0, le=PIN_COUNT)
    score: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _check_rolls(self) -> "Frame":
        r1, r2, r3 = self.roll1, self.roll2, self.roll3
        if r2 is not None and r1 is None:
            raise ValueError("roll2 requires roll1")
        if r3 is not None and r2 is None:
            raise ValueError("roll3 requires roll2")

        if self.frame_number < FRAME_COUNT:
            if r3 is not None:
                raise ValueError("roll3 is only allowed in the 10th frame")
            if r2 is not None and r1 == PIN_COUNT:
                raise ValueError("a strike frame has no second roll")
            if r2 is not None and r1 + r2 > PIN_COUNT:
                raise ValueError("total pins in a frame cannot exceed 10")
            return self

        if r2 is not None and r1 != PIN_COUNT and r1 + r2 > PIN_COUNT:
            raise ValueError("10th frame first two rolls cannot exceed 10 without a strike")
        if r3 is not None:
            if r1 != PIN_COUNT and r1 + r2 != PIN_COUNT:
                raise ValueError("roll3 requires a strike or spare in the 10th frame")
            if r1 == PIN_COUNT and r2 != PIN_COUNT and r2 + r3 > PIN_COUNT:
                raise ValueError("10th frame roll2 + roll3 cannot exceed 10 after a strike")
        return self

    @property
    def rolls(self) -> List[int]:
        """Recorded rolls in bowling order, unset slots dropped."""
        return [r for r in (self.roll1, self.roll2, self.roll3) if r is not None]


class Player(BaseModel):
    id: str
    name: str = Field(..., min_length=1)
    game_id: Optional[str] = Field(default=None, alias="gameId")
    frames: List[Frame]

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("frames")
    @classmethod
    def _validate_frames(cls, value: List[Frame]) -> List[Frame]:
        numbers = sorted(f.frame_number for f in value)
        if numbers != list(range(1, FRAME_COUNT + 1)):
            raise ValueError("frames must be numbered exactly 1..10")
        return sorted(value, key=lambda f: f.frame_number)


class Game(BaseModel):
    id: str
    is_finished: bool = Field(default=False, alias="isFinished")
    players: List[Player] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class GameCreate(BaseModel):
    player_names: List[str] = Field(..., alias="playerNames")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class RollRequest(BaseModel):
    player_id: str = Field(..., alias="playerId")
    # bounds are enforced by the engine so they surface as OutOfRangeRoll
    pins: int

    model_config = ConfigDict(populate_by_name=True)
