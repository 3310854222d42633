import pytest

from config import Config
from database.errors import ConfigError


def test_validate_requires_database_url(monkeypatch):
    monkeypatch.setattr(Config, "DATABASE_URL", "  ")
    with pytest.raises(ConfigError, match="DATABASE_URL"):
        Config.validate()


def test_validate_accepts_complete_config(monkeypatch):
    monkeypatch.setattr(Config, "DATABASE_URL", "sqlite:///recruitment.db")
    monkeypatch.setattr(Config, "BCRYPT_ROUNDS", "10")
    Config.validate()
    assert Config.bcrypt_rounds() == 10


@pytest.mark.parametrize("rounds", ["ten", "", "3", "32"])
def test_bad_bcrypt_rounds(monkeypatch, rounds):
    monkeypatch.setattr(Config, "DATABASE_URL", "sqlite:///recruitment.db")
    monkeypatch.setattr(Config, "BCRYPT_ROUNDS", rounds)
    with pytest.raises(ConfigError, match="BCRYPT_ROUNDS"):
        Config.validate()
