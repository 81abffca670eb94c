"""Game session controller.

Single entry point for creating, starting and advancing games. It picks the
engine for the game type, runs the move, then checks the invariants every
accepted state must keep before handing the result back to the caller.
"""

import logging
import random
from typing import Callable, Optional, Sequence

from . import clover, duet, placement, tiles
from .errors import InvariantViolation, Rejection, Transition, ValidationError, forbid, reject
from .keycard import validate_key_card
from .rules import MoveContext, RuleSettings
from .state import (
    CODENAMES, GAME_TYPES, SCRABBLE, SO_CLOVER, STATUS_COMPLETED, STATUS_PLAYING,
    GameSnapshot,
)
from .words import CODENAMES_WORDS

logger = logging.getLogger(__name__)

ENGINES = {
    CODENAMES: duet.MOVES,
    SCRABBLE: {
        'place_tiles': placement.place_tiles,
        'exchange_tiles': tiles.exchange_tiles,
        'pass': tiles.pass_turn,
    },
    SO_CLOVER: clover.MOVES,
}

# (min, max) seats
SEAT_LIMITS = {
    CODENAMES: (2, 2),
    SCRABBLE: (2, 4),
    SO_CLOVER: (2, 4),
}

FIRST_PHASE = {
    CODENAMES: duet.PHASE_CLUE,
    SCRABBLE: tiles.PHASE_PLAY,
    SO_CLOVER: clover.PHASE_CLUE_WRITING,
}


class GameSessionController:
    def __init__(self, settings: Optional[RuleSettings] = None,
                 is_valid_word: Optional[Callable[[str], bool]] = None,
                 word_pool: Sequence[str] = CODENAMES_WORDS):
        self.settings = settings or RuleSettings()
        self.is_valid_word = is_valid_word or (lambda word: True)
        self.word_pool = word_pool

    def _deal(self, game_type, player_count, options, rng):
        if game_type == CODENAMES:
            return duet.create_board(self.settings, options, self.word_pool, rng)
        if game_type == SCRABBLE:
            return tiles.create_board(player_count, self.settings, options, rng)
        return clover.create_board(player_count, self.settings, options, rng)

    def create(self, game_type: str, options: Optional[dict] = None,
               rng: Optional[random.Random] = None) -> GameSnapshot:
        """A waiting game dealt for the maximum number of seats."""
        if game_type not in GAME_TYPES:
            raise ValidationError(f'Unknown game type {game_type!r}')
        rng = rng or random.SystemRandom()
        max_players = SEAT_LIMITS[game_type][1]
        snapshot = GameSnapshot(
            game_type=game_type,
            board=self._deal(game_type, max_players, options or {}, rng),
            phase=FIRST_PHASE[game_type],
            player_count=max_players,
        )
        self.check_invariants(snapshot)
        return snapshot

    def start(self, snapshot: GameSnapshot, seat_count: int,
              rng: Optional[random.Random] = None) -> GameSnapshot:
        """Move a waiting game to playing with ``seat_count`` seats filled."""
        low, high = SEAT_LIMITS[snapshot.game_type]
        if not low <= seat_count <= high:
            raise ValidationError(f'Need {low} to {high} players to start', playerCount=seat_count)
        rng = rng or random.SystemRandom()
        nxt = snapshot.copy()
        if snapshot.game_type != CODENAMES and seat_count != snapshot.player_count:
            options = {}
            if snapshot.game_type == SCRABBLE:
                options['dictionaryMode'] = snapshot.board.dictionary_mode
            else:
                options['decoyCount'] = snapshot.board.decoy_count
            nxt.board = self._deal(snapshot.game_type, seat_count, options, rng)
        nxt.player_count = seat_count
        nxt.status = STATUS_PLAYING
        nxt.phase = FIRST_PHASE[snapshot.game_type]
        nxt.current_turn = 0
        self.check_invariants(nxt)
        return nxt

    def apply(self, snapshot: GameSnapshot, seat: int, payload: dict,
              rng: Optional[random.Random] = None):
        """Run one move. Returns a Transition or a Rejection."""
        snapshot.check_variant()
        move_type = payload.get('moveType')
        if (snapshot.game_type == SO_CLOVER and move_type == 'acknowledge_result'
                and snapshot.status == STATUS_COMPLETED):
            return Transition(snapshot, move_type, outcome={'gameComplete': True}, noop=True)
        if snapshot.status != STATUS_PLAYING:
            return reject('Game is not in progress', status=snapshot.status)
        if isinstance(seat, bool) or not isinstance(seat, int) or not 0 <= seat < snapshot.player_count:
            return forbid('You are not seated in this game')
        handler = ENGINES[snapshot.game_type].get(move_type)
        if handler is None:
            return reject(f'Invalid move type {move_type!r}')

        ctx = MoveContext(
            seat=seat,
            payload=payload,
            rng=rng or random.SystemRandom(),
            settings=self.settings,
            is_valid_word=self.is_valid_word,
            word_pool=self.word_pool,
        )
        result = handler(snapshot, ctx)
        if isinstance(result, Rejection):
            logger.info(f"[move] rejected game={snapshot.id} seat={seat} type={move_type}: {result.message}")
            return result
        if not result.noop:
            self.check_invariants(result.state, before=snapshot)
        return result

    def check_invariants(self, snapshot: GameSnapshot, before: Optional[GameSnapshot] = None) -> None:
        try:
            self._check(snapshot, before)
        except InvariantViolation as exc:
            logger.error(f"[invariant] game={snapshot.id} type={snapshot.game_type}: {exc.message}")
            raise

    def _check(self, snapshot, before):
        snapshot.check_variant()
        if (snapshot.result is None) == (snapshot.status == STATUS_COMPLETED):
            raise InvariantViolation('result must be set exactly when the game is completed')
        if not 0 <= snapshot.current_turn < snapshot.player_count:
            raise InvariantViolation(f'current_turn {snapshot.current_turn} is not a seat')

        board = snapshot.board
        if snapshot.game_type == CODENAMES:
            validate_key_card(board.key_card)
            if len(board.words) != len(set(board.words)):
                raise InvariantViolation('Board words must be distinct')
            if before is not None and before.board.key_card != board.key_card:
                raise InvariantViolation('Key card changed mid-game')
            if board.timer_tokens < 0:
                raise InvariantViolation('Timer tokens went negative')
        elif snapshot.game_type == SCRABBLE:
            if board.tile_count() != tiles.TOTAL_TILES:
                raise InvariantViolation(f'Tile count is {board.tile_count()}, expected {tiles.TOTAL_TILES}')
            if len(board.racks) != snapshot.player_count or len(board.scores) != snapshot.player_count:
                raise InvariantViolation('Racks and scores must have one entry per seat')
            if any(len(rack) > tiles.RACK_SIZE for rack in board.racks):
                raise InvariantViolation('A rack holds more than the rack size')
        elif snapshot.game_type == SO_CLOVER:
            if len(board.clovers) != snapshot.player_count:
                raise InvariantViolation('There must be one clover per seat')
            if sorted(board.spectator_order) != list(range(snapshot.player_count)):
                raise InvariantViolation('Spectator order must be a permutation of the seats')
