import os
import sys
import pytest

# Ensure the backend root (containing the `leaderboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from leaderboard import create_app, db
from leaderboard.services.scores.store import MemoryScoreStore


class TestConfig:
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = '*'
    LOG_LEVEL = 'DEBUG'


class UnboundConfig(TestConfig):
    SQLALCHEMY_DATABASE_URI = None


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import leaderboard.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def memory_store():
    return MemoryScoreStore()


@pytest.fixture()
def memory_app(memory_store):
    return create_app(UnboundConfig, store=memory_store)


@pytest.fixture()
def memory_client(memory_app):
    return memory_app.test_client()


@pytest.fixture()
def unbound_client():
    return create_app(UnboundConfig).test_client()
