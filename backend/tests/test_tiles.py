import random

import pytest

from wordtable.services.games import tiles
from wordtable.services.games.errors import ValidationError
from wordtable.services.games.rules import MoveContext, RuleSettings
from wordtable.services.games.state import SCRABBLE, GameSnapshot


def make_game(players=2, seed=5):
    board = tiles.create_board(players, RuleSettings(), {}, random.Random(seed))
    return GameSnapshot(SCRABBLE, board, status='playing', phase='play', player_count=players)


def ctx(seat, move_type, settings=None, **payload):
    payload['moveType'] = move_type
    return MoveContext(seat=seat, payload=payload, rng=random.Random(0), settings=settings or RuleSettings())


def test_new_bag_distribution():
    bag = tiles.new_bag(random.Random(0))
    assert len(bag) == tiles.TOTAL_TILES == 100
    assert bag.count('E') == 12
    assert bag.count('Z') == 1
    assert bag.count(tiles.BLANK) == 2
    assert tiles.tile_value('q') == 10
    assert tiles.rack_value(['Q', 'Z', tiles.BLANK]) == 20


def test_create_board_deals_racks():
    board = tiles.create_board(4, RuleSettings(), {}, random.Random(0))
    assert [len(r) for r in board.racks] == [7, 7, 7, 7]
    assert len(board.tile_bag) == 72
    assert board.scores == [0, 0, 0, 0]
    assert board.dictionary_mode == 'friendly'
    assert board.tile_count() == 100
    with pytest.raises(ValidationError):
        tiles.create_board(2, RuleSettings(), {'dictionaryMode': 'loose'}, random.Random(0))


def test_pass_advances_turn():
    game = make_game(players=3)
    result = tiles.pass_turn(game, ctx(0, 'pass'))
    assert result.outcome == {'nextTurn': 1, 'gameOver': False, 'consecutivePasses': 1}
    assert result.state.board.last_play == {'playerSeat': 0, 'type': 'pass'}
    assert result.state.board.turn_number == 2
    assert game.current_turn == 0


def test_pass_out_of_turn():
    result = tiles.pass_turn(make_game(), ctx(1, 'pass'))
    assert result.status_code == 403


def test_exchange_tiles():
    game = make_game()
    rack = list(game.board.racks[0])
    bag_size = len(game.board.tile_bag)
    result = tiles.exchange_tiles(game, ctx(0, 'exchange_tiles', tiles=rack[:3]))

    b = result.state.board
    assert len(b.racks[0]) == 7
    assert b.racks[0][:4] == rack[3:]
    assert len(b.tile_bag) == bag_size
    assert b.tile_count() == 100
    assert b.consecutive_passes == 1
    assert b.last_play == {'playerSeat': 0, 'type': 'exchange', 'count': 3}
    assert result.outcome['nextTurn'] == 1


def test_exchange_rejections():
    game = make_game()
    assert tiles.exchange_tiles(game, ctx(0, 'exchange_tiles', tiles=[])).status_code == 400
    missing = [t for t in 'ABCDEFGHIJKLMNOPQRSTUVWXYZ' if t not in game.board.racks[0]][0]
    assert tiles.exchange_tiles(game, ctx(0, 'exchange_tiles', tiles=[missing])).status_code == 400

    game.board.tile_bag = game.board.tile_bag[:6]
    low = tiles.exchange_tiles(game, ctx(0, 'exchange_tiles', tiles=game.board.racks[0][:1]))
    assert low.status_code == 400
    assert 'Not enough tiles' in low.message


@pytest.mark.parametrize('limit', [4, 6])
def test_scoreless_turns_end_the_game(limit):
    settings = RuleSettings(max_scoreless_turns=limit)
    game = make_game()
    for _ in range(limit):
        assert game.status == 'playing'
        game = tiles.pass_turn(game, ctx(game.current_turn, 'pass', settings)).state
    assert game.status == 'completed'
    assert game.result == 'win'
    # Each seat loses what it is still holding.
    assert game.board.scores == [-tiles.rack_value(r) for r in game.board.racks]
    assert game.current_turn == game.board.winners[0]


@pytest.mark.parametrize('scores, leader', [([30, 10], 0), ([10, 30], 1)])
def test_stalemate_is_won_by_the_leader(scores, leader):
    settings = RuleSettings(max_scoreless_turns=2)
    game = make_game()
    b = game.board
    b.scores = list(scores)
    b.tile_bag.extend(b.racks[0] + b.racks[1])
    for seat, letter in enumerate('AE'):
        b.tile_bag.remove(letter)
        b.racks[seat] = [letter]
    for _ in range(2):
        game = tiles.pass_turn(game, ctx(game.current_turn, 'pass', settings)).state
    assert game.status == 'completed'
    assert game.board.scores == [s - 1 for s in scores]
    assert game.board.winners == [leader]
    assert game.current_turn == leader


def test_tie_lists_every_winner():
    game = make_game()
    b = game.board
    b.scores = [20, 20]
    b.tile_bag.extend(b.racks[0] + b.racks[1])
    b.racks = [['A'], ['E']]
    b.tile_bag.remove('A')
    b.tile_bag.remove('E')
    tiles.finish_game(game)
    assert b.scores == [19, 19]
    assert b.winners == [0, 1]
    assert game.current_turn == 0
    assert game.status == 'completed'


def test_take_from_rack():
    assert tiles.take_from_rack(['A', 'A', 'B'], ['A', 'B']) == ['A']
    assert tiles.take_from_rack(['A', 'B'], ['A', 'A']) is None
