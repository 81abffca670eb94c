def test_socket_connect_and_join(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    # Flush any initial events
    sio_client.get_received('/ws')

    sio_client.emit('join_game', {'game_code': 'abcd12'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    joined = [pkt for pkt in received if pkt['name'] == 'joined']
    assert joined and joined[0]['args'][0] == {'room': 'game:ABCD12'}


def test_join_requires_game_code(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('join_game', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'error' for pkt in received)


def test_ping_pong(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'pong' and pkt['args'][0] == {'n': 1} for pkt in received)


def test_move_broadcasts_state_update(sio_client, client):
    created = client.post('/api/games/create', json={'game_type': 'codenames', 'name': 'Alice'}).get_json()
    code = created['game_code']
    client.post('/api/games/join', json={'game_code': code, 'name': 'Bob'})

    sio_client.emit('join_game', {'game_code': code}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    res = client.post(f'/api/games/{code}/move', json={
        'player_id': created['player']['id'], 'moveType': 'clue', 'clueWord': 'zzyzx',
    })
    version = res.get_json()['game']['version']

    events = sio_client.get_received('/ws')
    updates = [e['args'][0] for e in events if e['name'] == 'state_update']
    assert {'game_code': code, 'version': version} in updates


def test_rejected_move_does_not_broadcast(sio_client, client):
    created = client.post('/api/games/create', json={'game_type': 'codenames', 'name': 'Alice'}).get_json()
    code = created['game_code']
    bob = client.post('/api/games/join', json={'game_code': code, 'name': 'Bob'}).get_json()['player']

    sio_client.emit('join_game', {'game_code': code}, namespace='/ws')
    sio_client.get_received('/ws')

    res = client.post(f'/api/games/{code}/move', json={'player_id': bob['id'], 'moveType': 'clue', 'clueWord': 'zzyzx'})
    assert res.status_code == 403
    events = sio_client.get_received('/ws')
    assert not any(e['name'] == 'state_update' for e in events)
