import os
import sys
import pytest

# Ensure the backend root (containing the `aioreal` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from aioreal import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = 'DEBUG'
    # Run countdown and feedback workers inline with no delay
    ENABLE_SCHEDULER_IN_TESTS = True
    COUNTDOWN_STEP_MS = 0
    FEEDBACK_DELAY_MS = 0
    ROUND_DURATION_SEC = 5.0


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import aioreal.models  # noqa: F401
        db.create_all()
        yield application
        application.extensions['aioreal_hub'].shutdown()
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def seeded_images(flask_app):
    from aioreal.models import GameImage
    rows = []
    for i in range(8):
        rows.append(GameImage(url=f'https://cdn.example.com/ai/{i}.jpg', is_ai=True, category='test'))
        rows.append(GameImage(url=f'https://cdn.example.com/real/{i}.jpg', is_ai=False, category='test'))
    db.session.add_all(rows)
    db.session.commit()
    return rows


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
