"""Persistence for game snapshots.

Every accepted move is stored with a conditional update on the version that
was read, so of two concurrent moves on one game exactly one commits.
"""

import json
import logging

from wordtable import db
from wordtable.models import Game, Move, Player

from .errors import AuthorizationError, ConflictError, NotFoundError, Transition, ValidationError
from .state import GameSnapshot

logger = logging.getLogger(__name__)


def load_game(pin: str) -> Game:
    game = Game.query.filter_by(pin=(pin or '').upper()).first()
    if game is None:
        raise NotFoundError('Game not found')
    return game


def find_player(game: Game, player_id) -> Player:
    if player_id is None:
        raise ValidationError('player_id is required')
    player = Player.query.filter_by(id=player_id, game_id=game.id).first()
    if player is None:
        raise AuthorizationError('You are not in this game')
    return player


def check_expected_version(game: Game, expected) -> None:
    if expected is not None and expected != game.version:
        raise ConflictError(
            'Game has changed since you last loaded it; refetch and try again',
            version=game.version,
        )


def save_snapshot(game: Game, snapshot: GameSnapshot, move: Move = None) -> Game:
    """Write ``snapshot`` over ``game`` if nobody else has since, then commit.

    ``move`` is appended in the same transaction.
    """
    read_version = game.version
    values = game.snapshot_columns(snapshot)
    values['version'] = read_version + 1
    updated = (
        Game.query
        .filter_by(id=game.id, version=read_version)
        .update(values, synchronize_session=False)
    )
    if updated == 0:
        db.session.rollback()
        logger.info(f"[store] conflict game={game.id} read_version={read_version}")
        raise ConflictError('Another move was applied first; refetch and try again')
    if move is not None:
        db.session.add(move)
    db.session.commit()
    return game


def commit_transition(game: Game, transition: Transition, player: Player) -> Game:
    move = Move(
        game_id=game.id,
        player_id=player.id,
        seat=player.seat,
        move_type=transition.move_type,
        move_data=json.dumps(transition.move_data or {}),
    )
    return save_snapshot(game, transition.state, move)
