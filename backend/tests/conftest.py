import os
import random
import sys
import pytest

# Ensure the backend root (containing the `wordtable` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wordtable import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = 'DEBUG'
    DEFAULT_TIMER_TOKENS = 9
    DEFAULT_CLUE_STRICTNESS = 'strict'
    MAX_WORD_SWAPS = 0
    MAX_SCORELESS_TURNS = 6
    DICTIONARY_PATH = None
    DEFAULT_DICTIONARY_MODE = 'off'
    CLOVER_DECOY_COUNT = 1
    CLOVER_FIRST_ATTEMPT_SCORE = 6
    CLOVER_SECOND_ATTEMPT_FULL_SCORE = 4


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import wordtable.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


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


@pytest.fixture()
def rng():
    return random.Random(1234)
