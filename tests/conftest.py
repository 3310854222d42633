"""
Shared fixtures: every test gets its own SQLite file with the schema applied.
"""

import pytest

from database.db_setup import init_db

# bcrypt's minimum cost keeps hashing fast in tests
TEST_ROUNDS = 4


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'recruitment.db'}"


@pytest.fixture
def conn(db_url):
    connection = init_db(db_url)
    yield connection
    connection.close()


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers."""
    def _feed(*answers):
        it = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed
