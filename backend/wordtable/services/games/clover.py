"""So Clover: clue writing, then one resolution round per spectator.

Each seat owns a clover of four keyword cards (plus decoys that are only
shown to guessers). A slot is correct when it holds the right card at the
right rotation.
"""

import math
import random
import re
from typing import List, Optional, Sequence

from .errors import Transition, ValidationError, forbid, reject
from .rules import MoveContext, RuleSettings
from .state import (
    RESULT_LOSS, RESULT_WIN, CloverBoard, Clover, CloverGuess, GameSnapshot, RoundResult,
)
from .words import CLOVER_KEYWORDS

PHASE_CLUE_WRITING = 'clue_writing'
PHASE_RESOLUTION = 'resolution'
PHASE_COMPLETED = 'completed'
SLOTS = 4
ROTATIONS = 4
WORDS_PER_CARD = 4

_WHITESPACE = re.compile(r'\s')


def create_board(player_count: int, settings: RuleSettings, options: dict,
                 rng: Optional[random.Random] = None,
                 keyword_pool: Sequence[str] = CLOVER_KEYWORDS) -> CloverBoard:
    rng = rng or random.SystemRandom()
    decoys = options.get('decoyCount', settings.clover_decoy_count)
    if isinstance(decoys, bool) or not isinstance(decoys, int) or decoys < 0:
        raise ValidationError('decoyCount must be a non-negative integer')

    per_player = SLOTS + decoys
    needed = player_count * per_player * WORDS_PER_CARD
    pool = sorted({w.upper() for w in keyword_pool})
    if len(pool) < needed:
        raise ValidationError(f'Not enough keywords for {player_count} players')

    words = rng.sample(pool, needed)
    cards = [words[i:i + WORDS_PER_CARD] for i in range(0, needed, WORDS_PER_CARD)]

    clovers = []
    for seat in range(player_count):
        first = seat * per_player
        clovers.append(Clover(
            card_indices=list(range(first, first + SLOTS)),
            decoy_card_indices=list(range(first + SLOTS, first + per_player)),
            rotations=[rng.randrange(ROTATIONS) for _ in range(SLOTS)],
        ))

    order = list(range(player_count))
    rng.shuffle(order)
    return CloverBoard(
        keyword_cards=cards,
        clovers=clovers,
        spectator_order=order,
        decoy_count=decoys,
        round_scores=[None] * player_count,
    )


def player_keywords(board: CloverBoard, seat: int) -> List[str]:
    return [word for idx in board.clovers[seat].card_indices for word in board.keyword_cards[idx]]


def spectator_seat(board: CloverBoard) -> Optional[int]:
    if board.current_spectator_idx < 0:
        return None
    return board.spectator_order[board.current_spectator_idx]


def fresh_guess(board: CloverBoard, spectator: int, rng: random.Random) -> CloverGuess:
    clover = board.clovers[spectator]
    order = clover.card_indices + clover.decoy_card_indices
    rng.shuffle(order)
    return CloverGuess(available_card_order=order)


def slot_results(clover: Clover, placements, rotations) -> List[bool]:
    return [
        placements[slot] == clover.card_indices[slot] and rotations[slot] == clover.rotations[slot]
        for slot in range(SLOTS)
    ]


def round_score(attempt: int, results: List[bool], settings: RuleSettings) -> Optional[int]:
    """Points for a scored guess, or None when attempt 1 earns a retry."""
    correct = sum(results)
    if attempt == 1:
        return settings.clover_first_attempt_score if correct == SLOTS else None
    if correct == SLOTS:
        return settings.clover_second_attempt_full_score
    return min(correct, settings.clover_second_attempt_full_score - 1)


def winning_total(player_count: int, settings: RuleSettings) -> int:
    return math.ceil(player_count * settings.clover_first_attempt_score * 0.5)


def submit_clues(snapshot: GameSnapshot, ctx: MoveContext):
    board = snapshot.board
    if snapshot.phase != PHASE_CLUE_WRITING:
        return reject('Not in clue writing phase')
    if board.clovers[ctx.seat].clues_submitted:
        return reject('Clues already submitted')
    clues = ctx.payload.get('clues')
    if not isinstance(clues, list) or len(clues) != SLOTS:
        return reject(f'Must provide exactly {SLOTS} clues')

    keywords = {w.upper() for w in player_keywords(board, ctx.seat)}
    cleaned = []
    for i, clue in enumerate(clues):
        clue = clue.strip() if isinstance(clue, str) else ''
        if not clue:
            return reject(f'Clue {i + 1} is empty')
        if _WHITESPACE.search(clue):
            return reject(f'"{clue}" must be a single word')
        if clue.upper() in keywords:
            return reject(f'"{clue}" is one of your keywords and is not allowed')
        cleaned.append(clue.upper())
    if len(set(cleaned)) != SLOTS:
        return reject('Clues must all be different')

    nxt = snapshot.copy()
    b = nxt.board
    b.clovers[ctx.seat].clues = cleaned
    b.clovers[ctx.seat].clues_submitted = True
    if all(c.clues_submitted for c in b.clovers):
        nxt.phase = PHASE_RESOLUTION
        b.current_spectator_idx = 0
        b.current_guess = fresh_guess(b, b.spectator_order[0], ctx.rng)
    return Transition(nxt, 'submit_clues', move_data={'clues': cleaned}, outcome={'phase': nxt.phase})


def _check_guesser(snapshot: GameSnapshot, ctx: MoveContext, take_over: bool = False):
    board = snapshot.board
    if snapshot.phase != PHASE_RESOLUTION:
        return reject('Not in resolution phase')
    if ctx.seat == spectator_seat(board):
        return forbid('The spectator cannot touch the cards')
    if board.current_guess is None:
        return reject('Waiting for everyone to acknowledge the last result')
    driver = board.current_guess.driver_seat
    if not take_over and driver is not None and driver != ctx.seat:
        return forbid('Another player is arranging; take control first', driverSeat=driver)
    return None


def _check_arrangement(guess: CloverGuess, placements, rotations, complete: bool) -> Optional[str]:
    if not isinstance(placements, list) or len(placements) != SLOTS or \
            not isinstance(rotations, list) or len(rotations) != SLOTS:
        return 'Invalid placement data'
    for r in rotations:
        if isinstance(r, bool) or not isinstance(r, int) or not 0 <= r < ROTATIONS:
            return 'Rotations must be 0 to 3'
    placed = [p for p in placements if p is not None]
    if complete and len(placed) != SLOTS:
        return f'All {SLOTS} positions must have a card'
    if any(isinstance(p, bool) or p not in guess.available_card_order for p in placed):
        return 'That card is not in play this round'
    if len(set(placed)) != len(placed):
        return 'A card can only be placed once'
    if guess.attempt == 2 and guess.first_attempt_results:
        for slot, frozen in enumerate(guess.first_attempt_results):
            if frozen and (placements[slot] != guess.placements[slot] or rotations[slot] != guess.rotations[slot]):
                return 'Correct cards from the first attempt are locked in place'
    return None


def take_control(snapshot: GameSnapshot, ctx: MoveContext):
    denied = _check_guesser(snapshot, ctx, take_over=True)
    if denied:
        return denied
    nxt = snapshot.copy()
    nxt.board.current_guess.driver_seat = ctx.seat
    return Transition(nxt, 'take_control', outcome={'driverSeat': ctx.seat})


def place_cards(snapshot: GameSnapshot, ctx: MoveContext):
    denied = _check_guesser(snapshot, ctx)
    if denied:
        return denied
    placements, rotations = ctx.payload.get('placements'), ctx.payload.get('rotations')
    error = _check_arrangement(snapshot.board.current_guess, placements, rotations, complete=False)
    if error:
        return reject(error)

    nxt = snapshot.copy()
    guess = nxt.board.current_guess
    guess.placements = list(placements)
    guess.rotations = list(rotations)
    guess.driver_seat = ctx.seat
    return Transition(nxt, 'place_cards', move_data={'placements': list(placements), 'rotations': list(rotations)})


def submit_guess(snapshot: GameSnapshot, ctx: MoveContext):
    denied = _check_guesser(snapshot, ctx)
    if denied:
        return denied
    board = snapshot.board
    placements, rotations = ctx.payload.get('placements'), ctx.payload.get('rotations')
    error = _check_arrangement(board.current_guess, placements, rotations, complete=True)
    if error:
        return reject(error)

    spectator = spectator_seat(board)
    clover = board.clovers[spectator]
    attempt = board.current_guess.attempt
    results = slot_results(clover, placements, rotations)
    score = round_score(attempt, results, ctx.settings)

    nxt = snapshot.copy()
    b = nxt.board
    if score is None:
        b.current_guess = CloverGuess(
            placements=[p if ok else None for p, ok in zip(placements, results)],
            rotations=[r if ok else 0 for r, ok in zip(rotations, results)],
            attempt=2,
            first_attempt_results=results,
            available_card_order=list(board.current_guess.available_card_order),
        )
        b.last_round_result = None
    else:
        b.round_scores[spectator] = score
        b.clovers[spectator].score = score
        b.current_guess = None
        b.last_round_result = RoundResult(
            spectator_seat=spectator,
            score=score,
            correct_placements=results,
            guess_placements=list(placements),
            guess_rotations=list(rotations),
            actual_card_indices=list(clover.card_indices),
            actual_rotations=list(clover.rotations),
            attempt=attempt,
        )

    return Transition(
        nxt, 'submit_guess',
        move_data={'placements': list(placements), 'rotations': list(rotations), 'score': score, 'attempt': attempt},
        outcome={'score': score, 'attempt': attempt, 'correctPlacements': results},
    )


def acknowledge_result(snapshot: GameSnapshot, ctx: MoveContext):
    board = snapshot.board
    if snapshot.phase != PHASE_RESOLUTION:
        return reject('Not in resolution phase')
    result = board.last_round_result
    if result is None:
        return reject('No result to acknowledge')
    if ctx.seat in result.acknowledged:
        return Transition(snapshot, 'acknowledge_result', outcome={'gameComplete': False}, noop=True)

    nxt = snapshot.copy()
    b = nxt.board
    b.last_round_result.acknowledged.append(ctx.seat)
    game_complete = False
    if len(b.last_round_result.acknowledged) >= nxt.player_count:
        b.last_round_result = None
        if b.current_spectator_idx >= len(b.spectator_order) - 1:
            total = sum(s or 0 for s in b.round_scores)
            nxt.complete(RESULT_WIN if total >= winning_total(nxt.player_count, ctx.settings) else RESULT_LOSS)
            nxt.phase = PHASE_COMPLETED
            b.current_guess = None
            game_complete = True
        else:
            b.current_spectator_idx += 1
            b.current_guess = fresh_guess(b, spectator_seat(b), ctx.rng)

    return Transition(nxt, 'acknowledge_result', outcome={'gameComplete': game_complete})


MOVES = {
    'submit_clues': submit_clues,
    'take_control': take_control,
    'place_cards': place_cards,
    'submit_guess': submit_guess,
    'acknowledge_result': acknowledge_result,
}
