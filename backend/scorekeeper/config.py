import logging
import os

logger = logging.getLogger(__name__)


def _parse_positive_int(env_var: str, default: int) -> int:
    raw_value = os.getenv(env_var)
    if raw_value is None or not raw_value.strip():
        return default

    try:
        value = int(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid integer (got %r); defaulting to %d",
            env_var,
            raw_value,
            default,
        )
        return default

    if value < 1:
        logger.warning("%s must be at least 1; defaulting to %d", env_var, default)
        return default

    return value


MAX_PLAYERS = _parse_positive_int("BOWLING_MAX_PLAYERS", 4)
