import logging
import uuid
from typing import Any, Mapping, Optional, Sequence

from .. import config
from ..exceptions import GameNotFound, PlayerNotFound, RollRejected
from ..schemas import Game, Player
from ..scoring import bowling
from .validation import clean_player_names, validate_pins

logger = logging.getLogger(__name__)


def create_game(
    player_names: Optional[Sequence[Any]],
    *,
    max_players: Optional[int] = None,
) -> Game:
    """Start a game with ten empty frames for every named player."""
    limit = config.MAX_PLAYERS if max_players is None else max_players
    names = clean_player_names(player_names, max_players=limit)

    game_id = uuid.uuid4().hex
    players = [
        Player(
            id=uuid.uuid4().hex,
            name=name,
            game_id=game_id,
            frames=bowling.new_frames(),
        )
        for name in names
    ]
    game = Game(id=game_id, is_finished=False, players=players)
    logger.info("Created game %s with %d player(s)", game_id, len(players))
    return game


def find_game(games: Mapping[str, Game], game_id: str) -> Game:
    game = games.get(game_id)
    if game is None:
        raise GameNotFound(game_id)
    return game


def find_player(game: Game, player_id: str) -> Player:
    for player in game.players:
        if player.id == player_id:
            return player
    raise PlayerNotFound(player_id)


def is_game_finished(game: Game) -> bool:
    return bool(game.players) and all(bowling.is_finished(p.frames) for p in game.players)


def record_roll(game: Game, player_id: str, pins: Any) -> Game:
    """Record one roll for ``player_id`` and refresh scores and the finished flag.

    Rejected rolls propagate as domain exceptions and leave ``game`` as it was.
    """
    value = validate_pins(pins)
    player = find_player(game, player_id)

    try:
        frame = bowling.roll(player.frames, value, player_id=player.id)
    except RollRejected as exc:
        logger.warning(
            "Rejected roll of %d for player %s in game %s: %s",
            value,
            player.id,
            game.id,
            exc.detail,
        )
        raise

    logger.debug(
        "Player %s rolled %d in frame %d of game %s",
        player.id,
        value,
        frame.frame_number,
        game.id,
    )

    was_finished = game.is_finished
    game.is_finished = is_game_finished(game)
    if game.is_finished and not was_finished:
        logger.info("Game %s finished", game.id)
    return game
