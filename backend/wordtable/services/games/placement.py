"""Tile placement validation, word discovery and scoring.

``place_tiles`` runs the structural checks first and only then builds the
formed words, so a malformed play never reaches the dictionary.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from .errors import Transition, reject
from .rules import MoveContext
from .state import STATUS_COMPLETED, GameSnapshot, PlacedTile
from .tiles import (
    BLANK, BOARD_SIZE, RACK_SIZE, advance_turn, check_turn, draw_tiles,
    finish_game, take_from_rack, tile_value,
)

CENTER = (7, 7)
BINGO_BONUS = 50

TW, DW, TL, DL = 'TW', 'DW', 'TL', 'DL'

_PREMIUM_POSITIONS = {
    TW: [(0, 0), (0, 7), (0, 14), (7, 0), (7, 14), (14, 0), (14, 7), (14, 14)],
    DW: [(1, 1), (1, 13), (2, 2), (2, 12), (3, 3), (3, 11), (4, 4), (4, 10), (7, 7),
         (10, 4), (10, 10), (11, 3), (11, 11), (12, 2), (12, 12), (13, 1), (13, 13)],
    TL: [(1, 5), (1, 9), (5, 1), (5, 5), (5, 9), (5, 13),
         (9, 1), (9, 5), (9, 9), (9, 13), (13, 5), (13, 9)],
    DL: [(0, 3), (0, 11), (2, 6), (2, 8), (3, 0), (3, 7), (3, 14),
         (6, 2), (6, 6), (6, 8), (6, 12), (7, 3), (7, 11),
         (8, 2), (8, 6), (8, 8), (8, 12), (11, 0), (11, 7), (11, 14),
         (12, 6), (12, 8), (14, 3), (14, 11)],
}
PREMIUMS: Dict[Tuple[int, int], str] = {
    pos: kind for kind, positions in _PREMIUM_POSITIONS.items() for pos in positions
}

HORIZONTAL = (0, 1)
VERTICAL = (1, 0)


@dataclass
class Placement:
    row: int
    col: int
    letter: str
    is_blank: bool = False

    @property
    def pos(self):
        return (self.row, self.col)

    @property
    def rack_tile(self):
        return BLANK if self.is_blank else self.letter

    def to_dict(self):
        return {'row': self.row, 'col': self.col, 'letter': self.letter, 'isBlank': self.is_blank}


@dataclass
class FormedWord:
    word: str
    score: int
    cells: List[Tuple[int, int]]

    def to_dict(self):
        return {'word': self.word, 'score': self.score}


def premium_at(row: int, col: int) -> Optional[str]:
    return PREMIUMS.get((row, col))


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_placements(raw) -> Optional[List[Placement]]:
    if not isinstance(raw, list):
        return None
    placements = []
    for item in raw:
        if not isinstance(item, dict):
            return None
        row, col, letter = item.get('row'), item.get('col'), item.get('letter')
        if not (_is_int(row) and _is_int(col) and isinstance(letter, str)):
            return None
        letter = letter.upper()
        if len(letter) != 1 or not ('A' <= letter <= 'Z'):
            return None
        placements.append(Placement(row, col, letter, bool(item.get('isBlank'))))
    return placements


def _occupied(cells, row, col) -> bool:
    return in_bounds(row, col) and cells[row][col] is not None


def _touches_tile(cells, row, col) -> bool:
    return any(_occupied(cells, row + dr, col + dc) for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)))


def validate_placement(cells, placements: List[Placement], rack: List[str],
                       first_move: bool) -> Optional[str]:
    """Structural checks. Returns the first failure reason or None."""
    if not placements:
        return 'You must place at least one tile'
    for p in placements:
        if not in_bounds(p.row, p.col):
            return 'Tile position is off the board'
        if cells[p.row][p.col] is not None:
            return 'Cannot place a tile on an occupied cell'
    positions = {p.pos for p in placements}
    if len(positions) != len(placements):
        return 'Cannot place multiple tiles on the same cell'

    rows = {p.row for p in placements}
    cols = {p.col for p in placements}
    if len(rows) > 1 and len(cols) > 1:
        return 'All tiles must be placed in a single row or column'

    if len(rows) == 1:
        row = placements[0].row
        line = [(row, c) for c in range(min(cols), max(cols) + 1)]
    else:
        col = placements[0].col
        line = [(r, col) for r in range(min(rows), max(rows) + 1)]
    for r, c in line:
        if (r, c) not in positions and cells[r][c] is None:
            return 'There is a gap in your word; tiles must be contiguous'

    if first_move:
        if CENTER not in positions:
            return 'First word must cover the center star'
        if len(placements) < 2:
            return 'First word must be at least 2 letters long'
    elif not any(_touches_tile(cells, p.row, p.col) for p in placements):
        return 'New tiles must connect to existing tiles on the board'

    remaining = list(rack)
    for p in placements:
        if p.rack_tile not in remaining:
            return f'You don\'t have the tile "{p.rack_tile}" in your rack'
        remaining.remove(p.rack_tile)
    return None


def _word_at(cells, row, col, direction, new_positions: Set[Tuple[int, int]]) -> Optional[FormedWord]:
    dr, dc = direction
    while _occupied(cells, row - dr, col - dc):
        row, col = row - dr, col - dc

    letters, positions = [], []
    total, multiplier = 0, 1
    while _occupied(cells, row, col):
        tile = cells[row][col]
        value = tile.value
        if (row, col) in new_positions:
            premium = premium_at(row, col)
            if premium == DL:
                value *= 2
            elif premium == TL:
                value *= 3
            elif premium == DW:
                multiplier *= 2
            elif premium == TW:
                multiplier *= 3
        total += value
        letters.append(tile.letter)
        positions.append((row, col))
        row, col = row + dr, col + dc

    if len(letters) < 2:
        return None
    return FormedWord(''.join(letters), total * multiplier, positions)


def formed_words(cells, placements: List[Placement]) -> List[FormedWord]:
    """Every word of two or more letters the new tiles are part of.

    ``cells`` must already contain the new tiles.
    """
    if not placements:
        return []
    new_positions = {p.pos for p in placements}
    first = placements[0]

    if len(placements) == 1:
        candidates = [_word_at(cells, first.row, first.col, d, new_positions) for d in (HORIZONTAL, VERTICAL)]
    else:
        main = HORIZONTAL if all(p.row == first.row for p in placements) else VERTICAL
        cross = VERTICAL if main == HORIZONTAL else HORIZONTAL
        candidates = [_word_at(cells, first.row, first.col, main, new_positions)]
        candidates += [_word_at(cells, p.row, p.col, cross, new_positions) for p in placements]
    return [w for w in candidates if w is not None]


def score_play(cells, placements: List[Placement]) -> Tuple[List[FormedWord], int]:
    words = formed_words(cells, placements)
    total = sum(w.score for w in words)
    if len(placements) == RACK_SIZE:
        total += BINGO_BONUS
    return words, total


def place_tiles(snapshot: GameSnapshot, ctx: MoveContext):
    denied = check_turn(snapshot, ctx)
    if denied:
        return denied
    board = snapshot.board
    placements = parse_placements(ctx.payload.get('placements'))
    if placements is None:
        return reject('Placements must be a list of {row, col, letter, isBlank}')

    error = validate_placement(board.cells, placements, board.racks[ctx.seat], not board.first_move_made)
    if error:
        return reject(error)

    cells = [list(row) for row in board.cells]
    for p in placements:
        cells[p.row][p.col] = PlacedTile(p.letter, 0 if p.is_blank else tile_value(p.letter), p.is_blank)

    words, total = score_play(cells, placements)
    if not words:
        return reject('No valid words formed')

    unknown = []
    if board.dictionary_mode != 'off':
        unknown = [w.word for w in words if not ctx.is_valid_word(w.word)]
    if unknown and board.dictionary_mode == 'strict':
        listed = ', '.join(f'"{w}"' for w in unknown)
        return reject(f'{listed} {"is not a valid word" if len(unknown) == 1 else "are not valid words"}',
                      invalidWords=unknown)

    nxt = snapshot.copy()
    b = nxt.board
    b.cells = cells
    rack = take_from_rack(b.racks[ctx.seat], [p.rack_tile for p in placements])
    rack.extend(draw_tiles(b.tile_bag, len(placements)))
    b.racks[ctx.seat] = rack
    b.scores[ctx.seat] += total
    b.consecutive_passes = 0
    b.first_move_made = True
    b.last_play = {
        'playerSeat': ctx.seat,
        'type': 'place',
        'tiles': [p.to_dict() for p in placements],
        'words': [w.to_dict() for w in words],
        'totalScore': total,
    }
    advance_turn(nxt, ctx.seat)
    if not rack and not b.tile_bag:
        finish_game(nxt, went_out=ctx.seat)

    outcome = {
        'wordsFormed': [w.to_dict() for w in words],
        'totalScore': total,
        'nextTurn': nxt.current_turn,
        'gameOver': nxt.status == STATUS_COMPLETED,
    }
    if unknown:
        outcome['unknownWords'] = unknown
    return Transition(
        nxt, 'place_tiles',
        move_data={'placements': [p.to_dict() for p in placements],
                   'words': [w.to_dict() for w in words], 'score': total},
        outcome=outcome,
    )
