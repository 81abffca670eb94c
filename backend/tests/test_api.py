from wordtable.models import Game


def _create(client, game_type='codenames', name='Alice', **options):
    res = client.post('/api/games/create', json={'game_type': game_type, 'name': name, 'options': options})
    assert res.status_code == 201
    return res.get_json()


def _join(client, code, name):
    res = client.post('/api/games/join', json={'game_code': code, 'name': name})
    assert res.status_code == 201
    return res.get_json()['player']


def _codenames(client):
    created = _create(client)
    code = created['game_code']
    bob = _join(client, code, 'Bob')
    return code, created['player'], bob


def _move(client, code, player, move_type, **fields):
    body = {'player_id': player['id'], 'moveType': move_type}
    body.update(fields)
    return client.post(f'/api/games/{code}/move', json=body)


def test_create_game(client):
    data = _create(client)
    assert len(data['game_code']) == 6
    assert data['player']['seat'] == 0
    game = data['game']
    assert game['status'] == 'waiting'
    assert game['game_type'] == 'codenames'
    assert len(game['words']) == 25
    assert len(game['key_card']) == 2
    assert game['timer_tokens'] == 9


def test_create_rejects_unknown_game_type(client):
    res = client.post('/api/games/create', json={'game_type': 'chess', 'name': 'Alice'})
    assert res.status_code == 400
    assert res.get_json()['success'] is False


def test_join_fills_seats_and_starts(client):
    code, alice, bob = _codenames(client)
    assert bob['seat'] == 1
    game = client.get(f'/api/games/{code}/state').get_json()
    assert game['status'] == 'playing'
    assert game['current_phase'] == 'clue'
    assert game['current_turn'] == 0
    assert [p['name'] for p in game['players']] == ['Alice', 'Bob']
    # The game is full now.
    res = client.post('/api/games/join', json={'game_code': code, 'name': 'Cara'})
    assert res.status_code == 403


def test_clue_then_guess_flow(client):
    code, alice, bob = _codenames(client)
    before = client.get(f'/api/games/{code}/state').get_json()

    res = _move(client, code, alice, 'clue', clueWord='zzyzx', intendedWords=[])
    assert res.status_code == 200
    body = res.get_json()
    assert body['success'] is True
    assert body['timerTokens'] == 8
    assert body['game']['current_phase'] == 'guess'
    assert body['game']['version'] == before['version'] + 1

    agent = before['key_card'][0]['agents'][0]
    res = _move(client, code, bob, 'guess', guessIndex=agent)
    assert res.status_code == 200
    body = res.get_json()
    assert body['cardType'] == 'agent'
    word = before['words'][agent]
    assert body['game']['board_state']['revealed'][word] == {'type': 'agent', 'guessedBy': 1}

    moves = client.get(f'/api/games/{code}/moves').get_json()['moves']
    assert [m['move_type'] for m in moves] == ['clue', 'guess']
    assert moves[1]['move_data']['guess_index'] == agent


def test_repeat_agent_guess_is_a_noop(client):
    code, alice, bob = _codenames(client)
    state = client.get(f'/api/games/{code}/state').get_json()
    agent = state['key_card'][0]['agents'][0]
    _move(client, code, alice, 'give_clue', clueWord='zzyzx')
    first = _move(client, code, bob, 'guess', guessIndex=agent).get_json()

    again = _move(client, code, bob, 'guess', guessIndex=agent)
    assert again.status_code == 200
    body = again.get_json()
    assert body['alreadyRevealed'] is True
    assert body['cardType'] == 'agent'
    assert body['game']['version'] == first['game']['version']
    assert len(client.get(f'/api/games/{code}/moves').get_json()['moves']) == 2


def test_wrong_seat_is_forbidden(client):
    code, alice, bob = _codenames(client)
    res = _move(client, code, bob, 'clue', clueWord='zzyzx')
    assert res.status_code == 403
    assert 'error' in res.get_json()


def test_illegal_clue_is_a_validation_error(client):
    code, alice, bob = _codenames(client)
    state = client.get(f'/api/games/{code}/state').get_json()
    res = _move(client, code, alice, 'clue', clueWord=state['words'][0])
    assert res.status_code == 400
    assert client.get(f'/api/games/{code}/state').get_json()['version'] == state['version']


def test_stale_expected_version_conflicts(client):
    code, alice, bob = _codenames(client)
    version = client.get(f'/api/games/{code}/state').get_json()['version']
    res = _move(client, code, alice, 'clue', clueWord='zzyzx', expectedVersion=version - 1)
    assert res.status_code == 409
    assert res.get_json()['success'] is False


def test_unknown_game_and_stranger(client):
    assert client.get('/api/games/NOPE99/state').status_code == 404
    code, alice, bob = _codenames(client)
    res = client.post(f'/api/games/{code}/move', json={'player_id': 9999, 'moveType': 'clue', 'clueWord': 'zzyzx'})
    assert res.status_code == 403


def test_tile_game_start_and_pass(client):
    created = _create(client, 'scrabble', dictionaryMode='off')
    code = created['game_code']
    alice = created['player']
    bob = _join(client, code, 'Bob')
    assert client.get(f'/api/games/{code}/state').get_json()['status'] == 'waiting'

    assert client.post(f'/api/games/{code}/start', json={'player_id': bob['id']}).status_code == 403
    res = client.post(f'/api/games/{code}/start', json={'player_id': alice['id']})
    assert res.status_code == 200
    game = res.get_json()['game']
    board = game['board_state']
    assert game['status'] == 'playing'
    assert len(board['racks']) == 2
    assert len(board['tileBag']) + sum(len(r) for r in board['racks']) == 100

    body = _move(client, code, alice, 'pass').get_json()
    assert body['nextTurn'] == 1
    assert body['game']['board_state']['consecutivePasses'] == 1


def test_start_needs_minimum_players(client):
    created = _create(client, 'so_clover')
    res = client.post(f"/api/games/{created['game_code']}/start", json={'player_id': created['player']['id']})
    assert res.status_code == 400


def test_clover_start_deals_for_seated_players(client):
    created = _create(client, 'so_clover')
    code = created['game_code']
    _join(client, code, 'Bob')
    _join(client, code, 'Cara')
    game = client.post(f'/api/games/{code}/start', json={'player_id': created['player']['id']}).get_json()['game']
    assert game['current_phase'] == 'clue_writing'
    assert len(game['board_state']['clovers']) == 3
    assert sorted(game['board_state']['spectatorOrder']) == [0, 1, 2]


def test_leaving_a_running_game_abandons_it(client):
    code, alice, bob = _codenames(client)
    res = client.post(f'/api/games/{code}/leave', json={'player_id': bob['id']})
    assert res.status_code == 200
    game = res.get_json()['game']
    assert game['status'] == 'abandoned'
    assert game['ended_at'] is not None
    assert _move(client, code, alice, 'clue', clueWord='zzyzx').status_code == 400


def test_leaving_the_lobby_frees_the_seat(client):
    created = _create(client, 'scrabble')
    code = created['game_code']
    bob = _join(client, code, 'Bob')
    cara = _join(client, code, 'Cara')
    client.post(f'/api/games/{code}/leave', json={'player_id': bob['id']})
    game = client.get(f'/api/games/{code}/state').get_json()
    assert game['status'] == 'waiting'
    assert [(p['name'], p['seat']) for p in game['players']] == [('Alice', 0), ('Cara', 1)]
    assert cara['seat'] == 2


def test_join_racing_for_a_taken_seat_conflicts(client, monkeypatch):
    created = _create(client, 'scrabble')
    code = created['game_code']
    _join(client, code, 'Bob')
    # Simulate a second request that read the seat count before Bob's insert.
    monkeypatch.setattr(Game, 'seat_count', property(lambda self: 1))
    res = client.post('/api/games/join', json={'game_code': code, 'name': 'Cara'})
    assert res.status_code == 409
    assert res.get_json()['success'] is False
    monkeypatch.undo()

    game = client.get(f'/api/games/{code}/state').get_json()
    assert [(p['name'], p['seat']) for p in game['players']] == [('Alice', 0), ('Bob', 1)]


def test_check_word(client):
    assert client.post('/api/games/check-word', json={'word': 'qi'}).get_json() == {'word': 'QI', 'valid': True}
    assert client.post('/api/games/check-word', json={'word': 'xqz'}).get_json()['valid'] is False
    assert client.post('/api/games/check-word', json={}).status_code == 400


def test_health_and_game_types(client):
    assert client.get('/health').get_json() == {'status': 'ok'}
    types = {t['game_type']: (t['min_players'], t['max_players']) for t in client.get('/api/game-types').get_json()}
    assert types == {'codenames': (2, 2), 'scrabble': (2, 4), 'so_clover': (2, 4)}
