from aioreal import db
from aioreal.models import GameImage, Score


def _flush(sio_client):
    return sio_client.get_received('/ws')


def _events(received, name):
    return [pkt['args'][0] if pkt['args'] else None for pkt in received if pkt['name'] == name]


def test_socket_connect_and_ping(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    received = _flush(sio_client)
    assert any(pkt['name'] == 'connected' for pkt in received)
    assert _events(received, 'state')[-1]['phase'] == 'register'

    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    assert _events(_flush(sio_client), 'pong') == [{'n': 1}]


def test_blank_username_is_rejected(sio_client):
    _flush(sio_client)
    sio_client.emit('register', {'username': '  '}, namespace='/ws')
    received = _flush(sio_client)
    assert _events(received, 'error')
    assert _events(received, 'state')[-1]['phase'] == 'register'
    assert not _events(received, 'preload')


def test_register_without_images_surfaces_error(sio_client):
    _flush(sio_client)
    sio_client.emit('register', {'username': 'Ana'}, namespace='/ws')
    received = _flush(sio_client)
    assert _events(received, 'error') == [{'message': 'No images available'}]
    assert _events(received, 'state')[-1]['phase'] == 'register'


def test_full_game_over_socket(flask_app, sio_client, seeded_images):
    _flush(sio_client)
    sio_client.emit('register', {'username': 'Ana', 'country': 'Japan'}, namespace='/ws')
    received = _flush(sio_client)
    preload = _events(received, 'preload')[0]
    images = preload['images']
    assert len(images) == 12
    assert all('is_ai' not in img for img in images)

    labels = {img.id: img.is_ai for img in GameImage.query.all()}

    # Report every asset; the last one kicks off the countdown, which runs
    # inline in tests and starts the first round.
    for i, img in enumerate(images):
        sio_client.emit('asset_loaded', {'image_id': img['id'], 'ok': i != 3}, namespace='/ws')
    received = _flush(sio_client)
    assert _events(received, 'load_progress')[-1] == {'progress': 100}
    assert [e['value'] for e in _events(received, 'countdown')] == [2, 1, 0]
    assert _events(received, 'music') == [{'track': 'game'}]
    started = _events(received, 'round_started')
    assert started[-1]['round'] == 0

    feedback = []
    for round_idx in range(12):
        image_id = started[-1]['image']['id']
        answer = labels[image_id] if round_idx != 5 else (not labels[image_id])
        sio_client.emit('answer', {'is_ai': answer}, namespace='/ws')
        received = _flush(sio_client)
        feedback += _events(received, 'feedback')
        started = _events(received, 'round_started') or started

    assert len(feedback) == 12
    assert [fb['correct'] for fb in feedback].count(False) == 1
    assert feedback[5]['streak'] == 0
    assert feedback[6]['streak'] == 1

    game_over = _events(received, 'game_over')[0]
    summary = game_over['summary']
    assert summary['correct_count'] == 11
    assert summary['total_images'] == 12
    assert summary['total_score'] == sum(fb['points'] for fb in feedback)
    assert game_over['rank'] == 1
    assert _events(received, 'music')[-1] == {'track': 'victory'}

    score = Score.query.one()
    assert score.total_score == summary['total_score']
    assert score.player.username == 'Ana'
    assert score.player.country == 'Japan'


def test_answer_outside_playing_is_ignored(sio_client, seeded_images):
    _flush(sio_client)
    sio_client.emit('answer', {'is_ai': True}, namespace='/ws')
    received = _flush(sio_client)
    assert not _events(received, 'feedback')


def test_answer_requires_boolean(sio_client):
    _flush(sio_client)
    sio_client.emit('answer', {'is_ai': 'yes'}, namespace='/ws')
    assert _events(_flush(sio_client), 'error')


def test_non_object_payloads_are_rejected(sio_client):
    _flush(sio_client)
    for event in ('register', 'asset_loaded', 'answer'):
        sio_client.emit(event, ['Ana'], namespace='/ws')
        errors = _events(_flush(sio_client), 'error')
        assert errors == [{'message': 'Expected an object payload'}]
    assert sio_client.is_connected('/ws')


def test_play_again_returns_to_registration(sio_client, seeded_images):
    _flush(sio_client)
    sio_client.emit('register', {'username': 'Ana'}, namespace='/ws')
    _flush(sio_client)
    sio_client.emit('play_again', namespace='/ws')
    state = _events(_flush(sio_client), 'state')[-1]
    assert state['phase'] == 'register'
    assert state['score'] == 0
    assert state['total_images'] == 0


def test_disconnect_discards_session(flask_app, seeded_images):
    from aioreal import socketio
    hub = flask_app.extensions['aioreal_hub']
    client = socketio.test_client(flask_app, namespace='/ws')
    assert len(hub) == 1
    client.emit('register', {'username': 'Ana'}, namespace='/ws')
    client.disconnect(namespace='/ws')
    assert len(hub) == 0
    assert db.session.query(Score).count() == 0
