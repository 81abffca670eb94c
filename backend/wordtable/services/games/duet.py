"""Codenames Duet turn engine.

Phases alternate ``clue`` (seat ``current_turn`` gives a clue) and ``guess``
(the partner guesses). Every guess is resolved against the clue giver's
side of the key card, never the guesser's.
"""

import random
from typing import List, Optional, Sequence

from .clues import STRICTNESS_LEVELS, check_clue
from .errors import Transition, ValidationError, forbid, reject
from .keycard import BOARD_WORDS, card_type_for, generate_key_card, unique_agents
from .rules import MoveContext, RuleSettings, as_index
from .state import (
    AGENT, ASSASSIN, BYSTANDER, RESULT_LOSS, RESULT_WIN, STATUS_COMPLETED,
    DuetBoard, GameSnapshot, RevealedCard, SetupState,
)

PHASE_CLUE = 'clue'
PHASE_GUESS = 'guess'
SEATS = 2


def create_board(settings: RuleSettings, options: dict, word_pool: Sequence[str],
                 rng: Optional[random.Random] = None) -> DuetBoard:
    rng = rng or random.SystemRandom()
    pool = sorted({w.upper() for w in word_pool})
    if len(pool) < BOARD_WORDS:
        raise ValidationError(f'Need at least {BOARD_WORDS} board words, got {len(pool)}')

    timer_tokens = options.get('timerTokens', settings.default_timer_tokens)
    strictness = options.get('clueStrictness', settings.default_clue_strictness)
    max_swaps = options.get('maxSwaps', settings.max_word_swaps)
    if isinstance(timer_tokens, bool) or not isinstance(timer_tokens, int) or timer_tokens < 1:
        raise ValidationError('timerTokens must be a positive integer')
    if strictness not in STRICTNESS_LEVELS:
        raise ValidationError(f'clueStrictness must be one of {", ".join(STRICTNESS_LEVELS)}')
    if isinstance(max_swaps, bool) or not isinstance(max_swaps, int) or max_swaps < 0:
        raise ValidationError('maxSwaps must be a non-negative integer')

    return DuetBoard(
        words=rng.sample(pool, BOARD_WORDS),
        key_card=generate_key_card(rng),
        timer_tokens=timer_tokens,
        clue_strictness=strictness,
        setup=SetupState(True, max_swaps, [0] * SEATS, [False] * SEATS) if max_swaps > 0 else None,
    )


def unrevealed_words(board: DuetBoard) -> List[str]:
    return [w for w in board.words if w not in board.revealed]


def _found(board: DuetBoard, index: int) -> bool:
    card = board.revealed.get(board.words[index])
    return card is not None and card.type == AGENT


def agents_remaining(board: DuetBoard, seat: int) -> int:
    """Agents on ``seat``'s side of the key that nobody has found yet."""
    return sum(1 for i in board.key_card[seat].agents if not _found(board, i))


def all_agents_found(board: DuetBoard) -> bool:
    return all(_found(board, i) for i in unique_agents(board.key_card))


def _refresh_counts(board: DuetBoard) -> None:
    board.agents_found = [len(board.key_card[s].agents) - agents_remaining(board, s) for s in range(SEATS)]


def _end_of_turn(board: DuetBoard) -> None:
    board.current_clue = None
    board.guesses_this_turn = 0


def give_clue(snapshot: GameSnapshot, ctx: MoveContext):
    board = snapshot.board
    if snapshot.phase != PHASE_CLUE:
        return forbid("It's not time to give a clue")
    if ctx.seat != snapshot.current_turn:
        return forbid("It's not your turn to give a clue")
    if board.setup is not None:
        return reject('Both players must finish setup before the first clue')

    clue_word = ctx.payload.get('clueWord')
    if not isinstance(clue_word, str):
        return reject('Clue cannot be empty')
    intended = ctx.payload.get('intendedWords') or []
    if not isinstance(intended, list) or any(as_index(i, BOARD_WORDS) is None for i in intended):
        return reject('intendedWords must be a list of board indices')
    if len(set(intended)) != len(intended):
        return reject('intendedWords must not repeat')

    check = check_clue(clue_word, unrevealed_words(board), board.clue_strictness)
    if not check.valid:
        return reject(check.reason)

    nxt = snapshot.copy()
    b = nxt.board
    b.timer_tokens = max(0, b.timer_tokens - 1)
    if b.timer_tokens == 0:
        b.sudden_death = True
    word = clue_word.strip().lower()
    b.current_clue = {'word': word, 'number': len(intended), 'intendedWords': list(intended), 'givenBy': ctx.seat}
    b.guesses_this_turn = 0
    nxt.phase = PHASE_GUESS

    return Transition(
        nxt, 'clue',
        move_data={'clue_word': word, 'clue_number': len(intended), 'intended_words': list(intended)},
        outcome={'timerTokens': b.timer_tokens, 'suddenDeath': b.sudden_death},
    )


def guess(snapshot: GameSnapshot, ctx: MoveContext):
    board = snapshot.board
    if snapshot.phase != PHASE_GUESS:
        return forbid("It's not time to guess")
    if ctx.seat == snapshot.current_turn:
        return forbid("It's not your turn to guess")
    index = as_index(ctx.payload.get('guessIndex'), len(board.words))
    if index is None:
        return reject('Invalid guess index')

    giver = snapshot.current_turn
    word = board.words[index]
    previous = board.revealed.get(word)
    if previous is not None and previous.type == AGENT:
        return Transition(
            snapshot, 'guess',
            outcome={'cardType': AGENT, 'word': word, 'alreadyRevealed': True,
                     'gameOver': snapshot.status == STATUS_COMPLETED, 'won': snapshot.result == RESULT_WIN,
                     'turnEnds': False},
            noop=True,
        )
    if previous is not None and giver in previous.bystander_for:
        # This key side already showed a bystander here, so the answer cannot change.
        return reject('Card already revealed')

    card_type = card_type_for(board.key_card, giver, index)
    nxt = snapshot.copy()
    b = nxt.board
    sides = set(previous.bystander_for) if previous is not None else set()
    if card_type == BYSTANDER:
        sides.add(giver)
    b.revealed[word] = RevealedCard(card_type, ctx.seat, sorted(sides))
    b.guesses_this_turn += 1
    _refresh_counts(b)

    if card_type == ASSASSIN:
        nxt.complete(RESULT_LOSS)
    elif all_agents_found(b):
        nxt.complete(RESULT_WIN)
    elif card_type == BYSTANDER and b.sudden_death:
        nxt.complete(RESULT_LOSS)
    elif card_type == BYSTANDER:
        nxt.phase = PHASE_CLUE
        nxt.current_turn = ctx.seat
        _end_of_turn(b)
    elif b.sudden_death and agents_remaining(b, giver) == 0:
        # No clues in sudden death: move straight on to the other key.
        nxt.current_turn = ctx.seat
        _end_of_turn(b)

    return Transition(
        nxt, 'guess',
        move_data={'guess_index': index, 'guessed_word': word, 'guess_result': card_type},
        outcome={
            'cardType': card_type,
            'word': word,
            'gameOver': nxt.status == STATUS_COMPLETED,
            'won': nxt.result == RESULT_WIN,
            'turnEnds': nxt.current_turn != snapshot.current_turn,
        },
    )


def end_turn(snapshot: GameSnapshot, ctx: MoveContext):
    board = snapshot.board
    if snapshot.phase != PHASE_GUESS:
        return forbid('You can only end the turn while guessing')
    if ctx.seat == snapshot.current_turn:
        return forbid("It's not your turn")
    if board.sudden_death and agents_remaining(board, ctx.seat) == 0:
        return reject('Your side of the key has no agents left to find, so passing would strand the game')

    nxt = snapshot.copy()
    nxt.current_turn = ctx.seat
    nxt.phase = PHASE_GUESS if board.sudden_death else PHASE_CLUE
    _end_of_turn(nxt.board)
    return Transition(nxt, 'end_turn', outcome={'nextTurn': ctx.seat, 'phase': nxt.phase})


def swap_word(snapshot: GameSnapshot, ctx: MoveContext):
    setup = snapshot.board.setup
    if setup is None or not setup.enabled:
        return reject('Word swaps are not enabled for this game')
    if setup.ready[ctx.seat]:
        return reject('You already confirmed ready and cannot swap more words')
    if setup.swaps_used[ctx.seat] >= setup.max_swaps:
        return reject('No swaps remaining')
    index = as_index(ctx.payload.get('wordIndex'), len(snapshot.board.words))
    if index is None:
        return reject('Invalid word index')

    in_play = {w.upper() for w in snapshot.board.words}
    available = sorted({w.upper() for w in ctx.word_pool} - in_play)
    if not available:
        return reject('No replacement words available')

    nxt = snapshot.copy()
    b = nxt.board
    old_word = b.words[index]
    b.words[index] = ctx.rng.choice(available)
    b.setup.swaps_used[ctx.seat] += 1
    return Transition(
        nxt, 'swap_word',
        move_data={'word_index': index, 'old_word': old_word, 'new_word': b.words[index]},
        outcome={'oldWord': old_word, 'newWord': b.words[index],
                 'swapsRemaining': b.setup.max_swaps - b.setup.swaps_used[ctx.seat]},
    )


def ready(snapshot: GameSnapshot, ctx: MoveContext):
    if snapshot.board.setup is None:
        return reject('No setup phase for this game')
    nxt = snapshot.copy()
    b = nxt.board
    b.setup.ready[ctx.seat] = True
    both_ready = all(b.setup.ready)
    if both_ready:
        b.setup = None
    return Transition(nxt, 'ready', outcome={'bothReady': both_ready})


MOVES = {
    'clue': give_clue,
    'give_clue': give_clue,
    'guess': guess,
    'end_turn': end_turn,
    'swap_word': swap_word,
    'ready': ready,
}
