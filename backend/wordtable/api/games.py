from flask import Blueprint, jsonify, request, current_app
from datetime import datetime, timezone
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from wordtable import db, socketio
from wordtable.models import Game, Move, Player
from wordtable.services.games.dictionary import load_dictionary
from wordtable.services.games.errors import AuthorizationError, ConflictError, GameError, InvariantViolation, Rejection, ValidationError
from wordtable.services.games.rules import RuleSettings
from wordtable.services.games.session import GameSessionController, SEAT_LIMITS
from wordtable.services.games.state import STATUS_ABANDONED, STATUS_PLAYING, STATUS_WAITING
from wordtable.services.games.store import (
    check_expected_version, commit_transition, find_player, load_game, save_snapshot,
)


games = Blueprint('games', __name__)


def _controller() -> GameSessionController:
    cfg = current_app.config
    dictionary = load_dictionary(cfg.get('DICTIONARY_PATH'))
    return GameSessionController(RuleSettings.from_config(cfg), dictionary.is_valid_word)


def _broadcast(game: Game) -> None:
    socketio.emit('state_update', {'game_code': game.pin, 'version': game.version}, to=f"game:{game.pin}", namespace='/ws')


@games.errorhandler(GameError)
def handle_game_error(exc):
    if isinstance(exc, InvariantViolation):
        current_app.logger.error(f"[invariant] {exc.message}")
    return jsonify(exc.to_dict()), exc.status_code


@games.errorhandler(SQLAlchemyError)
def handle_storage_error(exc):
    db.session.rollback()
    current_app.logger.error(f"[storage] {exc}")
    return jsonify({'success': False, 'error': 'Failed to update game'}), 500


def _start(game: Game) -> None:
    snapshot = _controller().start(game.to_snapshot(), game.seat_count)
    save_snapshot(game, snapshot)
    current_app.logger.info(f"[start] game={game.id} type={game.game_type} seats={game.seat_count}")


@games.route('/create', methods=['POST'])
def create_game():
    data = request.get_json(silent=True) or {}
    game_type = data.get('game_type')
    name = (data.get('name') or '').strip()
    options = data.get('options') or {}
    if not name:
        raise ValidationError('Player name is required')
    if not isinstance(options, dict):
        raise ValidationError('options must be an object')

    snapshot = _controller().create(game_type, options)
    low, high = SEAT_LIMITS[game_type]
    new_game = Game(game_type=game_type, min_players=low, max_players=high)
    new_game.apply_snapshot(snapshot)
    db.session.add(new_game)
    db.session.flush()
    creator = Player(name=name, seat=0, game_id=new_game.id)
    db.session.add(creator)
    db.session.commit()
    current_app.logger.info(f"[create] game={new_game.id} type={game_type} pin={new_game.pin}")

    return jsonify({
        'success': True,
        'game_code': new_game.pin,
        'player': creator.to_dict(),
        'game': new_game.to_dict(),
    }), 201


@games.route('/join', methods=['POST'])
def join_game():
    data = request.get_json(silent=True) or {}
    game_code = data.get('game_code')
    name = (data.get('name') or '').strip()
    if not all([game_code, name]):
        raise ValidationError('Game code and player name are required')

    game = load_game(game_code)
    if game.status != STATUS_WAITING:
        raise AuthorizationError('This game has already started')
    if game.seat_count >= game.max_players:
        raise AuthorizationError('This game is full')

    new_player = Player(name=name, seat=game.seat_count, game_id=game.id)
    db.session.add(new_player)
    try:
        db.session.commit()
    except IntegrityError:
        # Another join took this seat between our read and our insert.
        db.session.rollback()
        current_app.logger.info(f"[join] game={game.id} seat={new_player.seat} already taken")
        raise ConflictError('That seat was just taken; try joining again')
    current_app.logger.info(f"[join] game={game.id} seat={new_player.seat} name={name}")

    if game.seat_count >= game.max_players:
        _start(game)
    _broadcast(game)
    return jsonify({'success': True, 'player': new_player.to_dict(), 'game': game.to_dict()}), 201


@games.route('/<string:game_code>/state', methods=['GET'])
def get_game_state(game_code):
    game = load_game(game_code)
    return jsonify(game.to_dict())


@games.route('/<string:game_code>/start', methods=['POST'])
def start_game(game_code):
    data = request.get_json(silent=True) or {}
    game = load_game(game_code)
    player = find_player(game, data.get('player_id'))
    if game.status == STATUS_PLAYING:
        # Idempotent start: already started
        return jsonify({'success': True, 'game': game.to_dict()})
    if game.status != STATUS_WAITING:
        raise ValidationError('Game is not waiting for players')
    if player.seat != 0:
        raise AuthorizationError('Only the game creator may start the game')
    if game.seat_count < game.min_players:
        raise ValidationError(f'At least {game.min_players} players are required to start')

    _start(game)
    _broadcast(game)
    return jsonify({'success': True, 'game': game.to_dict()})


@games.route('/<string:game_code>/move', methods=['POST'])
def submit_move(game_code):
    data = request.get_json(silent=True) or {}
    game = load_game(game_code)
    player = find_player(game, data.get('player_id'))
    check_expected_version(game, data.get('expectedVersion'))

    result = _controller().apply(game.to_snapshot(), player.seat, data)
    if isinstance(result, Rejection):
        return jsonify(result.error.to_dict()), result.status_code

    if not result.noop:
        commit_transition(game, result, player)
        current_app.logger.info(
            f"[move] game={game.id} seat={player.seat} type={result.move_type} version={game.version}"
        )
        _broadcast(game)

    payload = dict(result.outcome)
    payload.update({'success': True, 'game': game.to_dict()})
    return jsonify(payload)


@games.route('/<string:game_code>/moves', methods=['GET'])
def list_moves(game_code):
    game = load_game(game_code)
    return jsonify({'moves': [m.to_dict() for m in game.moves.order_by(Move.id).all()]})


@games.route('/<string:game_code>/leave', methods=['POST'])
def leave_game(game_code):
    data = request.get_json(silent=True) or {}
    game = load_game(game_code)
    player = find_player(game, data.get('player_id'))

    if game.status == STATUS_PLAYING:
        game.status = STATUS_ABANDONED
        game.ended_at = datetime.now(timezone.utc)
        game.version = game.version + 1
        current_app.logger.info(f"[leave] game={game.id} seat={player.seat} abandoned")
    elif game.status == STATUS_WAITING:
        db.session.delete(player)
        db.session.flush()
        # Keep seats contiguous from 0.
        remaining = Player.query.filter_by(game_id=game.id).order_by(Player.seat).all()
        for seat, p in enumerate(remaining):
            p.seat = seat
        if not remaining:
            game.status = STATUS_ABANDONED
            game.ended_at = datetime.now(timezone.utc)
        current_app.logger.info(f"[leave] game={game.id} seat={player.seat} left lobby")
    else:
        raise ValidationError('Game is already over')

    db.session.commit()
    _broadcast(game)
    return jsonify({'success': True, 'game': game.to_dict()})


@games.route('/check-word', methods=['POST'])
def check_word():
    data = request.get_json(silent=True) or {}
    word = data.get('word')
    if not isinstance(word, str) or not word.strip():
        raise ValidationError('word is required')
    dictionary = load_dictionary(current_app.config.get('DICTIONARY_PATH'))
    return jsonify({'word': word.strip().upper(), 'valid': dictionary.is_valid_word(word.strip())})
