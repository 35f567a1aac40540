"""Ten-pin bowling scoring engine.

Three steps run for every roll: locate the frame that accepts the next ball,
validate and record the pins in that frame, then recompute every cumulative
score from scratch. Frames whose bonus rolls have not been bowled yet keep a
``None`` score, and so does every frame after them.
"""
from typing import Dict, List, Optional, Sequence

from ..exceptions import (
    FrameAlreadyComplete,
    FrameTotalExceeded,
    OutOfRangeRoll,
    PlayerAlreadyFinished,
    ThirdRollNotEarned,
)
from ..schemas import FRAME_COUNT, PIN_COUNT, Frame


def new_frames() -> List[Frame]:
    return [Frame(frame_number=n) for n in range(1, FRAME_COUNT + 1)]


def _ordered(frames: Sequence[Frame]) -> List[Frame]:
    return sorted(frames, key=lambda f: f.frame_number)


def is_strike(frame: Frame) -> bool:
    return frame.roll1 == PIN_COUNT


def is_spare(frame: Frame) -> bool:
    if frame.roll1 is None or frame.roll2 is None or is_strike(frame):
        return False
    return frame.roll1 + frame.roll2 == PIN_COUNT


def _earns_third_roll(frame: Frame) -> bool:
    # tenth frame only; a strike or spare in the first two balls
    if frame.roll1 is None or frame.roll2 is None:
        return False
    return frame.roll1 == PIN_COUNT or frame.roll1 + frame.roll2 == PIN_COUNT


def is_tenth_complete(frame: Frame) -> bool:
    if frame.roll1 is None or frame.roll2 is None:
        return False
    if _earns_third_roll(frame):
        return frame.roll3 is not None
    return True


def locate_frame(frames: Sequence[Frame]) -> Optional[Frame]:
    """Return the frame that accepts the next roll, or ``None`` when done."""
    ordered = _ordered(frames)
    for f in ordered[:-1]:
        if f.roll1 is None:
            return f
        if not is_strike(f) and f.roll2 is None:
            return f
    tenth = ordered[-1]
    if is_tenth_complete(tenth):
        return None
    return tenth


def is_finished(frames: Sequence[Frame]) -> bool:
    return is_tenth_complete(_ordered(frames)[-1])


def _check_pins(pins: int) -> None:
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise OutOfRangeRoll(pins)
    if not 0 <= pins <= PIN_COUNT:
        raise OutOfRangeRoll(pins)


def apply_roll(frame: Frame, pins: int) -> None:
    """Record ``pins`` in the first open roll slot of ``frame``.

    Every check runs before the slot is written, so a rejected roll leaves
    the frame untouched.
    """
    _check_pins(pins)
    n = frame.frame_number

    if n < FRAME_COUNT:
        if frame.roll1 is None:
            frame.roll1 = pins
            return
        if frame.roll2 is None:
            if is_strike(frame):
                raise FrameAlreadyComplete(n, f"frame {n} already complete by strike")
            if frame.roll1 + pins > PIN_COUNT:
                raise FrameTotalExceeded(n)
            frame.roll2 = pins
            return
        raise FrameAlreadyComplete(n)

    if frame.roll1 is None:
        frame.roll1 = pins
        return

    if frame.roll2 is None:
        if not is_strike(frame) and frame.roll1 + pins > PIN_COUNT:
            raise FrameTotalExceeded(
                n,
                "total pins in the 10th frame's first two rolls cannot exceed 10 "
                "unless the first is a strike",
            )
        frame.roll2 = pins
        return

    if frame.roll3 is None:
        if not _earns_third_roll(frame):
            raise ThirdRollNotEarned()
        if is_strike(frame) and frame.roll2 != PIN_COUNT and frame.roll2 + pins > PIN_COUNT:
            raise FrameTotalExceeded(
                n,
                "after a 10th frame strike, roll 2 + roll 3 cannot exceed 10 "
                "unless roll 2 is a strike",
            )
        frame.roll3 = pins
        return

    raise FrameAlreadyComplete(n, "10th frame already complete")


def _frame_rolls(frame: Frame) -> List[int]:
    if frame.frame_number < FRAME_COUNT:
        return [r for r in (frame.roll1, frame.roll2) if r is not None]
    return frame.rolls


def _next_rolls(frames: Sequence[Frame], index: int, count: int) -> Optional[List[int]]:
    """The ``count`` rolls bowled after ``frames[index]``, or ``None`` if not yet bowled."""
    found: List[int] = []
    for f in frames[index + 1:]:
        found.extend(_frame_rolls(f))
        if len(found) >= count:
            return found[:count]
    return None


def frame_points(frames: Sequence[Frame], index: int) -> Optional[int]:
    """Points earned by ``frames[index]`` alone, bonuses included.

    ``None`` means the frame cannot be scored yet.
    """
    f = frames[index]
    if f.roll1 is None:
        return None

    if f.frame_number < FRAME_COUNT:
        if is_strike(f):
            bonus = _next_rolls(frames, index, 2)
            return None if bonus is None else PIN_COUNT + sum(bonus)
        if f.roll2 is None:
            return None
        if is_spare(f):
            bonus = _next_rolls(frames, index, 1)
            return None if bonus is None else PIN_COUNT + bonus[0]
        return f.roll1 + f.roll2

    if f.roll2 is None:
        return None
    if _earns_third_roll(f):
        if f.roll3 is None:
            return None
        return f.roll1 + f.roll2 + f.roll3
    return f.roll1 + f.roll2


def recalculate_scores(frames: Sequence[Frame]) -> List[Frame]:
    """Recompute every cumulative score, left to right.

    The first frame that cannot be scored yet stops the running total; it
    and every later frame get ``None``.
    """
    ordered = _ordered(frames)
    running = 0
    blocked = False
    for index, f in enumerate(ordered):
        points = None if blocked else frame_points(ordered, index)
        if points is None:
            blocked = True
            f.score = None
            continue
        running += points
        f.score = running
    return ordered


def roll(frames: Sequence[Frame], pins: int, *, player_id: Optional[str] = None) -> Frame:
    """Bowl one ball for a player and rescore their frames.

    Returns the frame that received the roll.
    """
    # range first: an out-of-range pin count is reported even for a finished player
    _check_pins(pins)
    frame = locate_frame(frames)
    if frame is None:
        raise PlayerAlreadyFinished(player_id)
    apply_roll(frame, pins)
    recalculate_scores(frames)
    return frame


def init_state(config: Dict) -> Dict:
    return {
        "config": dict(config or {}),
        "frames": new_frames(),
    }


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    if "pins" not in event:
        raise ValueError("bowling event missing pins")
    roll(state["frames"], event["pins"])
    return state


def summary(state: Dict) -> Dict:
    frames = _ordered(state["frames"])
    scores = [f.score for f in frames]
    determined = [s for s in scores if s is not None]
    return {
        "frames": [_frame_rolls(f) for f in frames],
        "scores": scores,
        "total": determined[-1] if determined else 0,
        "finished": is_finished(frames),
    }
