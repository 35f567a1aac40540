from typing import Any, List, Optional, Sequence

from ..exceptions import DomainException, OutOfRangeRoll
from ..schemas import PIN_COUNT


class ValidationError(DomainException):
    """Raised when submitted game input is malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=400,
            title="Invalid input",
            detail=detail,
            code="invalid_input",
        )


def validate_pins(pins: Any) -> int:
    """Normalize a submitted pin count.

    Rules:
    - ``pins`` must be an integer (booleans are rejected)
    - ``pins`` must be between 0 and 10 inclusive, otherwise
      :class:`OutOfRangeRoll` is raised
    """

    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(pins, bool):
        raise ValidationError("Pins must be an integer (not a boolean).")
    if isinstance(pins, float) and not pins.is_integer():
        raise ValidationError("Pins must be a whole number.")
    try:
        value = int(pins)
    except (TypeError, ValueError):
        raise ValidationError("Pins must be an integer.")

    if not 0 <= value <= PIN_COUNT:
        raise OutOfRangeRoll(pins)
    return value


def clean_player_names(
    names: Optional[Sequence[Any]],
    *,
    max_players: int,
) -> List[str]:
    """Validate and normalize the player names for a new game.

    Rules:
    - At least one name is required
    - No more than ``max_players`` names
    - Names are stripped; blank entries are dropped
    - At least one non-blank name must remain
    """

    if names is None or isinstance(names, (str, bytes)) or len(names) == 0:
        raise ValidationError("At least 1 player is required.")
    if len(names) > max_players:
        raise ValidationError(f"Maximum of {max_players} players only.")

    cleaned: List[str] = []
    for raw in names:
        if raw is None:
            continue
        if not isinstance(raw, str):
            raise ValidationError("Player names must be strings.")
        trimmed = raw.strip()
        if trimmed:
            cleaned.append(trimmed)

    if not cleaned:
        raise ValidationError("Player names cannot be empty.")
    return cleaned
