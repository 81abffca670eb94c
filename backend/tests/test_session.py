import random

import pytest
from flask import Config as FlaskConfig

from config import Config
from wordtable.services.games.dictionary import load_dictionary
from wordtable.services.games.errors import InvariantViolation, Rejection, Transition, ValidationError
from wordtable.services.games.rules import RuleSettings
from wordtable.services.games.session import ENGINES, GameSessionController
from wordtable.services.games.state import CODENAMES, SCRABBLE, SO_CLOVER, KeyCardSide


@pytest.fixture()
def controller():
    return GameSessionController()


def playing(controller, game_type, seats=2):
    return controller.start(controller.create(game_type, rng=random.Random(3)), seats, rng=random.Random(4))


def test_create_deals_for_every_seat(controller):
    codenames = controller.create(CODENAMES, rng=random.Random(1))
    assert codenames.status == 'waiting'
    assert codenames.phase == 'clue'
    assert codenames.player_count == 2

    scrabble = controller.create(SCRABBLE, {'dictionaryMode': 'friendly'}, rng=random.Random(1))
    assert len(scrabble.board.racks) == 4

    with pytest.raises(ValidationError):
        controller.create('chess')


def test_start_redeals_for_the_table(controller):
    game = playing(controller, SCRABBLE, seats=3)
    assert game.status == 'playing'
    assert game.player_count == 3
    assert len(game.board.racks) == 3
    assert game.board.tile_count() == 100
    assert game.board.dictionary_mode == 'friendly'

    clover_game = playing(controller, SO_CLOVER, seats=2)
    assert len(clover_game.board.clovers) == 2
    assert clover_game.phase == 'clue_writing'


def test_start_keeps_options(controller):
    waiting = controller.create(SCRABBLE, {'dictionaryMode': 'off'}, rng=random.Random(1))
    assert controller.start(waiting, 2).board.dictionary_mode == 'off'


def test_start_checks_seat_limits(controller):
    waiting = controller.create(CODENAMES, rng=random.Random(1))
    with pytest.raises(ValidationError):
        controller.start(waiting, 1)
    with pytest.raises(ValidationError):
        controller.start(waiting, 3)


def test_apply_guards(controller):
    waiting = controller.create(CODENAMES, rng=random.Random(1))
    assert controller.apply(waiting, 0, {'moveType': 'clue', 'clueWord': 'zzyzx'}).status_code == 400

    game = playing(controller, CODENAMES)
    assert controller.apply(game, 2, {'moveType': 'clue', 'clueWord': 'zzyzx'}).status_code == 403
    assert controller.apply(game, 0, {'moveType': 'teleport'}).status_code == 400

    result = controller.apply(game, 0, {'moveType': 'clue', 'clueWord': 'zzyzx'}, rng=random.Random(0))
    assert isinstance(result, Transition)
    assert result.state.board.timer_tokens == 8


def test_rejections_are_logged(controller, caplog):
    game = playing(controller, CODENAMES)
    with caplog.at_level('INFO', logger='wordtable.services.games.session'):
        result = controller.apply(game, 1, {'moveType': 'clue', 'clueWord': 'zzyzx'})
    assert isinstance(result, Rejection)
    assert '[move] rejected' in caplog.text


def test_broken_state_raises(controller, monkeypatch, caplog):
    def tamper(snapshot, ctx):
        nxt = snapshot.copy()
        nxt.board.key_card[0] = KeyCardSide(agents=[0, 1], assassins=[2])
        return Transition(nxt, 'clue')

    monkeypatch.setitem(ENGINES[CODENAMES], 'clue', tamper)
    game = playing(controller, CODENAMES)
    with pytest.raises(InvariantViolation):
        controller.apply(game, 0, {'moveType': 'clue'})
    assert '[invariant]' in caplog.text


def test_key_card_cannot_be_replaced(controller, monkeypatch):
    other = controller.create(CODENAMES, rng=random.Random(99)).board.key_card

    def swap_key(snapshot, ctx):
        nxt = snapshot.copy()
        nxt.board.key_card = other
        return Transition(nxt, 'clue')

    monkeypatch.setitem(ENGINES[CODENAMES], 'clue', swap_key)
    game = playing(controller, CODENAMES)
    with pytest.raises(InvariantViolation):
        controller.apply(game, 0, {'moveType': 'clue'})


def test_tile_conservation_is_checked(controller):
    game = playing(controller, SCRABBLE)
    game.board.tile_bag.pop()
    with pytest.raises(InvariantViolation):
        controller.check_invariants(game)


def test_wrong_board_variant(controller):
    game = playing(controller, CODENAMES)
    game.board = playing(controller, SCRABBLE).board
    with pytest.raises(InvariantViolation):
        controller.apply(game, 0, {'moveType': 'clue', 'clueWord': 'zzyzx'})


def test_acknowledging_a_finished_clover_game_is_a_noop(controller):
    game = playing(controller, SO_CLOVER)
    game.complete('win')
    result = controller.apply(game, 1, {'moveType': 'acknowledge_result'})
    assert result.noop is True
    assert result.outcome == {'gameComplete': True}
    assert isinstance(controller.apply(game, 1, {'moveType': 'submit_clues'}), Rejection)


def test_settings_from_config():
    settings = RuleSettings.from_config({'DEFAULT_TIMER_TOKENS': '11', 'MAX_SCORELESS_TURNS': 4})
    assert settings.default_timer_tokens == 11
    assert settings.max_scoreless_turns == 4
    assert settings.default_dictionary_mode == 'friendly'
    controller = GameSessionController(settings)
    assert controller.create(CODENAMES, rng=random.Random(1)).board.timer_tokens == 11


def test_shipped_config_accepts_words_without_a_word_list():
    cfg = FlaskConfig('.')
    cfg.from_object(Config)
    dictionary = load_dictionary(cfg.get('DICTIONARY_PATH'))
    controller = GameSessionController(RuleSettings.from_config(cfg), dictionary.is_valid_word)

    game = playing(controller, SCRABBLE)
    board = game.board
    board.tile_bag.extend(board.racks[0])
    board.racks[0] = []
    for letter in 'CAT':
        board.tile_bag.remove(letter)
        board.racks[0].append(letter)

    placements = [{'row': 7, 'col': 7 + i, 'letter': letter} for i, letter in enumerate('CAT')]
    result = controller.apply(game, 0, {'moveType': 'place_tiles', 'placements': placements}, rng=random.Random(0))
    assert isinstance(result, Transition)
    assert result.state.board.dictionary_mode == 'friendly'
    assert result.outcome['unknownWords'] == ['CAT']
