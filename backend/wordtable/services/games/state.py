"""Game snapshots.

A ``GameSnapshot`` is the engine's whole view of one game: the shared fields
every game type has plus exactly one board variant. Engines take a snapshot
and return a new one; they never mutate what they were given.

The ``to_dict``/``from_dict`` pairs produce the JSON document that is stored
and sent to clients, so key names here are wire names and must not change.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .errors import InvariantViolation

CODENAMES = 'codenames'
SCRABBLE = 'scrabble'
SO_CLOVER = 'so_clover'
GAME_TYPES = (CODENAMES, SCRABBLE, SO_CLOVER)

STATUS_WAITING = 'waiting'
STATUS_PLAYING = 'playing'
STATUS_COMPLETED = 'completed'
STATUS_ABANDONED = 'abandoned'

RESULT_WIN = 'win'
RESULT_LOSS = 'loss'

AGENT = 'agent'
BYSTANDER = 'bystander'
ASSASSIN = 'assassin'


# ---- Codenames Duet ----

@dataclass
class KeyCardSide:
    agents: List[int]
    assassins: List[int]

    def to_dict(self):
        return {'agents': list(self.agents), 'assassins': list(self.assassins)}

    @classmethod
    def from_dict(cls, data):
        return cls(agents=list(data['agents']), assassins=list(data['assassins']))


@dataclass
class RevealedCard:
    type: str
    guessed_by: int
    # Clue-giving seats whose key side has already shown a bystander here.
    bystander_for: Optional[List[int]] = None

    def __post_init__(self):
        if self.bystander_for is None:
            # Duet guesser and clue giver are always opposite seats.
            self.bystander_for = [1 - self.guessed_by] if self.type == BYSTANDER else []

    def to_dict(self):
        data = {'type': self.type, 'guessedBy': self.guessed_by}
        if self.bystander_for:
            data['bystanderFor'] = list(self.bystander_for)
        return data

    @classmethod
    def from_dict(cls, data):
        sides = data.get('bystanderFor')
        return cls(type=data['type'], guessed_by=data['guessedBy'],
                   bystander_for=list(sides) if sides is not None else None)


@dataclass
class SetupState:
    """Pre-game word swapping. Present only until every seat is ready."""
    enabled: bool
    max_swaps: int
    swaps_used: List[int]
    ready: List[bool]

    def to_dict(self):
        return {
            'enabled': self.enabled,
            'maxSwaps': self.max_swaps,
            'swapsUsed': list(self.swaps_used),
            'ready': list(self.ready),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            enabled=bool(data.get('enabled')),
            max_swaps=int(data.get('maxSwaps', 0)),
            swaps_used=list(data.get('swapsUsed') or [0, 0]),
            ready=list(data.get('ready') or [False, False]),
        )


@dataclass
class DuetBoard:
    words: List[str]
    key_card: List[KeyCardSide]
    revealed: Dict[str, RevealedCard] = field(default_factory=dict)
    timer_tokens: int = 9
    sudden_death: bool = False
    clue_strictness: str = 'strict'
    agents_found: List[int] = field(default_factory=lambda: [0, 0])
    current_clue: Optional[Dict[str, Any]] = None
    guesses_this_turn: int = 0
    setup: Optional[SetupState] = None

    def board_state(self):
        state = {
            'revealed': {word: card.to_dict() for word, card in self.revealed.items()},
            'agents_found': list(self.agents_found),
            'current_clue': copy.deepcopy(self.current_clue),
            'guesses_this_turn': self.guesses_this_turn,
        }
        if self.setup is not None:
            state['setup'] = self.setup.to_dict()
        return state

    def top_level(self):
        # Codenames keeps these as columns on the game record itself.
        return {
            'words': list(self.words),
            'key_card': [side.to_dict() for side in self.key_card],
            'timer_tokens': self.timer_tokens,
            'sudden_death': self.sudden_death,
            'clue_strictness': self.clue_strictness,
        }

    @classmethod
    def from_parts(cls, board_state, columns):
        board_state = board_state or {}
        setup = board_state.get('setup')
        return cls(
            words=list(columns.get('words') or []),
            key_card=[KeyCardSide.from_dict(s) for s in columns.get('key_card') or []],
            revealed={w: RevealedCard.from_dict(r) for w, r in (board_state.get('revealed') or {}).items()},
            timer_tokens=int(columns.get('timer_tokens', 9)),
            sudden_death=bool(columns.get('sudden_death', False)),
            clue_strictness=columns.get('clue_strictness') or 'strict',
            agents_found=list(board_state.get('agents_found') or [0, 0]),
            current_clue=copy.deepcopy(board_state.get('current_clue')),
            guesses_this_turn=int(board_state.get('guesses_this_turn') or 0),
            setup=SetupState.from_dict(setup) if setup else None,
        )


# ---- Tile game ----

@dataclass
class PlacedTile:
    letter: str
    value: int
    is_blank: bool = False

    def to_dict(self):
        return {'letter': self.letter, 'value': self.value, 'isBlank': self.is_blank}

    @classmethod
    def from_dict(cls, data):
        return cls(letter=data['letter'], value=int(data['value']), is_blank=bool(data.get('isBlank')))


@dataclass
class TileBoard:
    cells: List[List[Optional[PlacedTile]]]
    tile_bag: List[str]
    racks: List[List[str]]
    scores: List[int]
    consecutive_passes: int = 0
    first_move_made: bool = False
    turn_number: int = 1
    dictionary_mode: str = 'friendly'
    last_play: Optional[Dict[str, Any]] = None
    winners: Optional[List[int]] = None

    def tile_count(self) -> int:
        on_board = sum(1 for row in self.cells for cell in row if cell is not None)
        return len(self.tile_bag) + sum(len(r) for r in self.racks) + on_board

    def board_state(self):
        state = {
            'cells': [[cell.to_dict() if cell else None for cell in row] for row in self.cells],
            'tileBag': list(self.tile_bag),
            'racks': [list(r) for r in self.racks],
            'scores': list(self.scores),
            'consecutivePasses': self.consecutive_passes,
            'firstMoveMade': self.first_move_made,
            'turnNumber': self.turn_number,
            'dictionaryMode': self.dictionary_mode,
        }
        if self.last_play is not None:
            state['lastPlay'] = copy.deepcopy(self.last_play)
        if self.winners is not None:
            state['winners'] = list(self.winners)
        return state

    @classmethod
    def from_parts(cls, board_state, columns=None):
        return cls(
            cells=[[PlacedTile.from_dict(c) if c else None for c in row] for row in board_state['cells']],
            tile_bag=list(board_state['tileBag']),
            racks=[list(r) for r in board_state['racks']],
            scores=list(board_state['scores']),
            consecutive_passes=int(board_state.get('consecutivePasses', 0)),
            first_move_made=bool(board_state.get('firstMoveMade', False)),
            turn_number=int(board_state.get('turnNumber', 1)),
            dictionary_mode=board_state.get('dictionaryMode') or 'friendly',
            last_play=copy.deepcopy(board_state.get('lastPlay')),
            winners=list(board_state['winners']) if board_state.get('winners') is not None else None,
        )


# ---- So Clover ----

@dataclass
class Clover:
    card_indices: List[int]
    decoy_card_indices: List[int]
    rotations: List[int]
    clues: List[Optional[str]] = field(default_factory=lambda: [None, None, None, None])
    clues_submitted: bool = False
    score: Optional[int] = None

    def to_dict(self):
        return {
            'cardIndices': list(self.card_indices),
            'decoyCardIndices': list(self.decoy_card_indices),
            'clues': list(self.clues),
            'cluesSubmitted': self.clues_submitted,
            'rotations': list(self.rotations),
            'score': self.score,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            card_indices=list(data['cardIndices']),
            decoy_card_indices=list(data.get('decoyCardIndices') or []),
            rotations=list(data['rotations']),
            clues=list(data.get('clues') or [None, None, None, None]),
            clues_submitted=bool(data.get('cluesSubmitted')),
            score=data.get('score'),
        )


@dataclass
class CloverGuess:
    placements: List[Optional[int]] = field(default_factory=lambda: [None, None, None, None])
    rotations: List[int] = field(default_factory=lambda: [0, 0, 0, 0])
    attempt: int = 1
    first_attempt_results: Optional[List[bool]] = None
    driver_seat: Optional[int] = None
    available_card_order: List[int] = field(default_factory=list)

    def to_dict(self):
        return {
            'placements': list(self.placements),
            'rotations': list(self.rotations),
            'attempt': self.attempt,
            'firstAttemptResults': list(self.first_attempt_results) if self.first_attempt_results is not None else None,
            'driverSeat': self.driver_seat,
            'availableCardOrder': list(self.available_card_order),
        }

    @classmethod
    def from_dict(cls, data):
        results = data.get('firstAttemptResults')
        return cls(
            placements=list(data.get('placements') or [None, None, None, None]),
            rotations=list(data.get('rotations') or [0, 0, 0, 0]),
            attempt=int(data.get('attempt', 1)),
            first_attempt_results=list(results) if results is not None else None,
            driver_seat=data.get('driverSeat'),
            available_card_order=list(data.get('availableCardOrder') or []),
        )


@dataclass
class RoundResult:
    spectator_seat: int
    score: int
    correct_placements: List[bool]
    guess_placements: List[Optional[int]]
    guess_rotations: List[int]
    actual_card_indices: List[int]
    actual_rotations: List[int]
    attempt: int
    acknowledged: List[int] = field(default_factory=list)

    def to_dict(self):
        return {
            'spectatorSeat': self.spectator_seat,
            'score': self.score,
            'correctPlacements': list(self.correct_placements),
            'guessPlacements': list(self.guess_placements),
            'guessRotations': list(self.guess_rotations),
            'actualCardIndices': list(self.actual_card_indices),
            'actualRotations': list(self.actual_rotations),
            'attempt': self.attempt,
            'acknowledged': list(self.acknowledged),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            spectator_seat=data['spectatorSeat'],
            score=data['score'],
            correct_placements=list(data['correctPlacements']),
            guess_placements=list(data['guessPlacements']),
            guess_rotations=list(data['guessRotations']),
            actual_card_indices=list(data['actualCardIndices']),
            actual_rotations=list(data['actualRotations']),
            attempt=int(data['attempt']),
            acknowledged=list(data.get('acknowledged') or []),
        )


@dataclass
class CloverBoard:
    keyword_cards: List[List[str]]
    clovers: List[Clover]
    spectator_order: List[int]
    decoy_count: int = 1
    current_spectator_idx: int = -1
    current_guess: Optional[CloverGuess] = None
    round_scores: List[Optional[int]] = field(default_factory=list)
    last_round_result: Optional[RoundResult] = None

    def board_state(self):
        return {
            'keywordCards': [list(card) for card in self.keyword_cards],
            'clovers': [c.to_dict() for c in self.clovers],
            'decoyCount': self.decoy_count,
            'spectatorOrder': list(self.spectator_order),
            'currentSpectatorIdx': self.current_spectator_idx,
            'currentGuess': self.current_guess.to_dict() if self.current_guess else None,
            'roundScores': list(self.round_scores),
            'lastRoundResult': self.last_round_result.to_dict() if self.last_round_result else None,
        }

    @classmethod
    def from_parts(cls, board_state, columns=None):
        guess = board_state.get('currentGuess')
        last = board_state.get('lastRoundResult')
        return cls(
            keyword_cards=[list(card) for card in board_state['keywordCards']],
            clovers=[Clover.from_dict(c) for c in board_state['clovers']],
            spectator_order=list(board_state['spectatorOrder']),
            decoy_count=int(board_state.get('decoyCount', 1)),
            current_spectator_idx=int(board_state.get('currentSpectatorIdx', -1)),
            current_guess=CloverGuess.from_dict(guess) if guess else None,
            round_scores=list(board_state.get('roundScores') or []),
            last_round_result=RoundResult.from_dict(last) if last else None,
        )


Board = Union[DuetBoard, TileBoard, CloverBoard]

BOARD_TYPES = {
    CODENAMES: DuetBoard,
    SCRABBLE: TileBoard,
    SO_CLOVER: CloverBoard,
}


def board_type_for(game_type: str):
    try:
        return BOARD_TYPES[game_type]
    except KeyError:
        raise InvariantViolation(f'Unknown game type {game_type!r}')


@dataclass
class GameSnapshot:
    game_type: str
    board: Board
    status: str = STATUS_WAITING
    phase: str = ''
    current_turn: int = 0
    result: Optional[str] = None
    player_count: int = 2
    id: Optional[int] = None
    version: int = 0

    def copy(self) -> 'GameSnapshot':
        return copy.deepcopy(self)

    def check_variant(self) -> None:
        expected = board_type_for(self.game_type)
        if not isinstance(self.board, expected):
            raise InvariantViolation(
                f'{self.game_type} game carries a {type(self.board).__name__} board'
            )

    def complete(self, result: str) -> None:
        self.status = STATUS_COMPLETED
        self.result = result

    def to_dict(self) -> Dict[str, Any]:
        self.check_variant()
        data = {
            'id': self.id,
            'game_type': self.game_type,
            'status': self.status,
            'current_phase': self.phase,
            'current_turn': self.current_turn,
            'board_state': self.board.board_state(),
            'result': self.result,
            'version': self.version,
        }
        if isinstance(self.board, DuetBoard):
            data.update(self.board.top_level())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], player_count: Optional[int] = None) -> 'GameSnapshot':
        game_type = data['game_type']
        board = board_type_for(game_type).from_parts(data.get('board_state') or {}, data)
        if player_count is None:
            player_count = data.get('player_count') or data.get('max_players') or 2
        return cls(
            game_type=game_type,
            board=board,
            status=data.get('status', STATUS_WAITING),
            phase=data.get('current_phase') or '',
            current_turn=int(data.get('current_turn') or 0),
            result=data.get('result'),
            player_count=int(player_count),
            id=data.get('id'),
            version=int(data.get('version') or 0),
        )
