"""Tile bag, racks and the turn/end-of-game bookkeeping for the tile game."""

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import Transition, ValidationError, forbid, reject
from .rules import MoveContext, RuleSettings
from .state import RESULT_WIN, STATUS_COMPLETED, GameSnapshot, TileBoard

BOARD_SIZE = 15
RACK_SIZE = 7
BLANK = '_'
PHASE_PLAY = 'play'
DICTIONARY_MODES = ('strict', 'friendly', 'off')

# letter: (count, value)
TILE_DISTRIBUTION: Dict[str, Tuple[int, int]] = {
    'A': (9, 1), 'B': (2, 3), 'C': (2, 3), 'D': (4, 2), 'E': (12, 1),
    'F': (2, 4), 'G': (3, 2), 'H': (2, 4), 'I': (9, 1), 'J': (1, 8),
    'K': (1, 5), 'L': (4, 1), 'M': (2, 3), 'N': (6, 1), 'O': (8, 1),
    'P': (2, 3), 'Q': (1, 10), 'R': (6, 1), 'S': (4, 1), 'T': (6, 1),
    'U': (4, 1), 'V': (2, 4), 'W': (2, 4), 'X': (1, 8), 'Y': (2, 4),
    'Z': (1, 10), BLANK: (2, 0),
}
TOTAL_TILES = sum(count for count, _ in TILE_DISTRIBUTION.values())


def tile_value(letter: str) -> int:
    if letter == BLANK:
        return 0
    return TILE_DISTRIBUTION.get(letter.upper(), (0, 0))[1]


def rack_value(rack: Sequence[str]) -> int:
    return sum(tile_value(t) for t in rack)


def new_bag(rng: random.Random) -> List[str]:
    bag = [letter for letter, (count, _) in TILE_DISTRIBUTION.items() for _ in range(count)]
    rng.shuffle(bag)
    return bag


def draw_tiles(bag: List[str], count: int) -> List[str]:
    """Pop up to ``count`` tiles off the end of ``bag``."""
    drawn = []
    for _ in range(min(count, len(bag))):
        drawn.append(bag.pop())
    return drawn


def return_tiles(bag: List[str], tiles: Sequence[str], rng: random.Random) -> None:
    bag.extend(tiles)
    rng.shuffle(bag)


def take_from_rack(rack: Sequence[str], tiles: Sequence[str]) -> Optional[List[str]]:
    """Rack left after removing ``tiles``; None if any tile is missing."""
    remaining = list(rack)
    for tile in tiles:
        if tile not in remaining:
            return None
        remaining.remove(tile)
    return remaining


def create_board(player_count: int, settings: RuleSettings, options: dict,
                 rng: Optional[random.Random] = None) -> TileBoard:
    rng = rng or random.SystemRandom()
    mode = options.get('dictionaryMode', settings.default_dictionary_mode)
    if mode not in DICTIONARY_MODES:
        raise ValidationError(f'dictionaryMode must be one of {", ".join(DICTIONARY_MODES)}')
    bag = new_bag(rng)
    return TileBoard(
        cells=[[None] * BOARD_SIZE for _ in range(BOARD_SIZE)],
        tile_bag=bag,
        racks=[draw_tiles(bag, RACK_SIZE) for _ in range(player_count)],
        scores=[0] * player_count,
        dictionary_mode=mode,
    )


def check_turn(snapshot: GameSnapshot, ctx: MoveContext):
    if snapshot.phase != PHASE_PLAY:
        return forbid('The game is not in play')
    if ctx.seat != snapshot.current_turn:
        return forbid("It's not your turn")
    return None


def advance_turn(snapshot: GameSnapshot, seat: int) -> None:
    snapshot.current_turn = (seat + 1) % snapshot.player_count
    snapshot.board.turn_number += 1


def finish_game(snapshot: GameSnapshot, went_out: Optional[int] = None) -> None:
    """Apply final rack adjustments, pick the winners and close the game.

    ``went_out`` is the seat that emptied its rack with the bag empty; it
    collects every other rack's value. Without it each seat just loses the
    value of what it still holds.
    """
    board = snapshot.board
    collected = 0
    for seat, rack in enumerate(board.racks):
        if seat == went_out:
            continue
        value = rack_value(rack)
        board.scores[seat] -= value
        collected += value
    if went_out is not None:
        board.scores[went_out] += collected

    best = max(board.scores)
    board.winners = [seat for seat, score in enumerate(board.scores) if score == best]
    snapshot.current_turn = board.winners[0]
    snapshot.complete(RESULT_WIN)


def _scoreless_turn(nxt: GameSnapshot, seat: int, settings: RuleSettings) -> bool:
    nxt.board.consecutive_passes += 1
    advance_turn(nxt, seat)
    if nxt.board.consecutive_passes >= settings.max_scoreless_turns:
        finish_game(nxt)
    return nxt.status == STATUS_COMPLETED


def pass_turn(snapshot: GameSnapshot, ctx: MoveContext):
    denied = check_turn(snapshot, ctx)
    if denied:
        return denied
    nxt = snapshot.copy()
    nxt.board.last_play = {'playerSeat': ctx.seat, 'type': 'pass'}
    game_over = _scoreless_turn(nxt, ctx.seat, ctx.settings)
    return Transition(
        nxt, 'pass',
        outcome={'nextTurn': nxt.current_turn, 'gameOver': game_over,
                 'consecutivePasses': nxt.board.consecutive_passes},
    )


def exchange_tiles(snapshot: GameSnapshot, ctx: MoveContext):
    denied = check_turn(snapshot, ctx)
    if denied:
        return denied
    board = snapshot.board
    tiles = ctx.payload.get('tiles')
    if not isinstance(tiles, list) or not tiles:
        return reject('You must select at least one tile to exchange')
    if not all(isinstance(t, str) for t in tiles):
        return reject('Tiles must be letters')
    tiles = [t.upper() for t in tiles]
    if len(board.tile_bag) < RACK_SIZE:
        return reject(f'Not enough tiles in the bag to exchange (need at least {RACK_SIZE})')
    remaining = take_from_rack(board.racks[ctx.seat], tiles)
    if remaining is None:
        return reject("You don't have those tiles in your rack")

    nxt = snapshot.copy()
    b = nxt.board
    # Draw before returning so a player never gets their own tiles back.
    remaining.extend(draw_tiles(b.tile_bag, len(tiles)))
    return_tiles(b.tile_bag, tiles, ctx.rng)
    b.racks[ctx.seat] = remaining
    b.last_play = {'playerSeat': ctx.seat, 'type': 'exchange', 'count': len(tiles)}
    game_over = _scoreless_turn(nxt, ctx.seat, ctx.settings)
    return Transition(
        nxt, 'exchange_tiles',
        move_data={'count': len(tiles)},
        outcome={'nextTurn': nxt.current_turn, 'gameOver': game_over,
                 'consecutivePasses': b.consecutive_passes},
    )
