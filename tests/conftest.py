import os
import sys
import random
import pytest

# Ensure the repository root (holding the flat game modules) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from game import GameSession, SessionState


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def session(rng):
    return GameSession("english", rng=rng)


@pytest.fixture()
def running_session(session):
    # first submission only starts the session
    session.submit_answer("")
    assert session.state.started
    return session


@pytest.fixture()
def make_state():
    def _make(**fields):
        data = {
            "language": "english",
            "current_word": "cat",
            "started": True,
        }
        data.update(fields)
        return SessionState.from_dict(data)
    return _make
