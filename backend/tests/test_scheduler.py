import logging
import time

import pytest

from aioreal import create_app, db, socketio
from aioreal.models import GameImage, Score
from aioreal.services.games import scheduler
from aioreal.services.games.hub import GameHub
from aioreal.services.games.sequencer import Phase


class LiveConfig:
    # Not TESTING: workers and the round ticker run as background tasks
    TESTING = False
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = 'INFO'
    SESSION_AI_IMAGES = 1
    SESSION_REAL_IMAGES = 1
    COUNTDOWN_FROM = 1
    COUNTDOWN_STEP_MS = 10
    FEEDBACK_DELAY_MS = 10
    TIMER_TICK_MS = 20
    ROUND_DURATION_SEC = 0.2


@pytest.fixture()
def live_app():
    application = create_app(LiveConfig)
    with application.app_context():
        db.create_all()
        db.session.add_all([
            GameImage(url='https://cdn.example.com/ai/live.jpg', is_ai=True),
            GameImage(url='https://cdn.example.com/real/live.jpg', is_ai=False),
        ])
        db.session.commit()
        yield application
        application.extensions['aioreal_hub'].shutdown()
        db.session.remove()
        db.drop_all()


def _events(received, name):
    return [pkt['args'][0] if pkt['args'] else None for pkt in received if pkt['name'] == name]


def _collect_until(client, name, timeout=5.0):
    received = []
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        received += client.get_received('/ws')
        if _events(received, name):
            break
        time.sleep(0.02)
    return received


def _recording_hub(app):
    events = []
    hub = GameHub(app, emit=lambda event, payload, sid: events.append((event, payload)))
    return hub, events


def _play_first_round(hub, sid):
    seq = hub.get_or_create(sid)
    seq.register('Ana')
    for img in seq.images:
        seq.mark_asset_loaded(img.id)
    assert seq.phase == Phase.PLAYING
    return seq


def test_live_rounds_tick_down_and_time_out(live_app):
    client = socketio.test_client(live_app, namespace='/ws')
    client.get_received('/ws')
    client.emit('register', {'username': 'Ana'}, namespace='/ws')
    images = _events(client.get_received('/ws'), 'preload')[0]['images']
    assert len(images) == 2
    for img in images:
        client.emit('asset_loaded', {'image_id': img['id']}, namespace='/ws')

    # Nobody answers; both rounds must resolve on their own
    received = _collect_until(client, 'game_over')
    client.disconnect(namespace='/ws')

    ticks = _events(received, 'tick')
    assert ticks
    assert all(0.0 <= t['time_left'] <= 0.2 for t in ticks)
    assert all(t['duration'] == 0.2 for t in ticks)
    for round_idx in (0, 1):
        values = [t['time_left'] for t in ticks if t['round'] == round_idx]
        assert values
        assert values == sorted(values, reverse=True)
        assert values[-1] == 0.0

    feedback = _events(received, 'feedback')
    assert [fb['round'] for fb in feedback] == [0, 1]
    assert all(fb['user_answer'] is None and fb['points'] == 0 for fb in feedback)

    game_over = _events(received, 'game_over')[0]
    assert game_over['summary']['total_score'] == 0
    assert game_over['rank'] == 1
    assert Score.query.count() == 1


def test_duplicate_advance_is_skipped(flask_app, seeded_images, caplog):
    caplog.set_level(logging.INFO)
    hub, _ = _recording_hub(flask_app)
    seq = _play_first_round(hub, 'sid-1')
    key = ('sid-1', seq.epoch, Phase.FEEDBACK.value, 0)
    assert hub.claim(key)
    assert not hub.claim(key)

    seq.answer(seq.images[0].is_ai)
    # The advance scheduled by the answer found its key already taken
    assert seq.phase == Phase.FEEDBACK
    assert '[timer-skip]' in caplog.text

    hub.release(key)
    scheduler.schedule_advance(flask_app, hub, 'sid-1')
    assert seq.phase == Phase.PLAYING
    assert seq.current_index == 1
    assert not hub._scheduled


def test_feedback_worker_aborts_after_play_again(flask_app, seeded_images, monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    hub, events = _recording_hub(flask_app)
    seq = _play_first_round(hub, 'sid-1')
    # The player restarts while the feedback worker is asleep
    monkeypatch.setattr(scheduler, '_sleep', lambda seconds: seq.play_again())

    seq.answer(seq.images[0].is_ai)

    assert seq.phase == Phase.REGISTERING
    assert seq.results == []
    assert len([p for e, p in events if e == 'round_started']) == 1
    assert '[timer-abort]' in caplog.text
    assert not hub._scheduled


def test_countdown_worker_aborts_when_session_is_gone(flask_app, seeded_images, monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    hub, events = _recording_hub(flask_app)
    seq = hub.get_or_create('sid-1')
    seq.register('Ana')
    monkeypatch.setattr(scheduler, '_sleep', lambda seconds: hub.discard('sid-1'))

    for img in seq.images:
        seq.mark_asset_loaded(img.id)

    assert seq.phase == Phase.COUNTDOWN
    assert not [p for e, p in events if e == 'countdown']
    assert '[timer-abort]' in caplog.text
    assert len(hub) == 0
    assert not hub._scheduled


def test_scheduler_stays_off_in_plain_tests(flask_app, seeded_images):
    flask_app.config['ENABLE_SCHEDULER_IN_TESTS'] = False
    hub, _ = _recording_hub(flask_app)
    seq = hub.get_or_create('sid-1')
    seq.register('Ana')
    for img in seq.images:
        seq.mark_asset_loaded(img.id)
    assert seq.phase == Phase.COUNTDOWN
    assert seq.countdown_value == 3
