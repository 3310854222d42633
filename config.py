"""
Configuration for the recruitment console.

Values come from the process environment, with a `.env` file in the working
directory loaded first if present.
"""

import os

from dotenv import load_dotenv

from database.errors import ConfigError

load_dotenv()

MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


class Config:
    # e.g. sqlite:///recruitment.db
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    BCRYPT_ROUNDS: str = os.getenv("BCRYPT_ROUNDS", "12")

    @classmethod
    def bcrypt_rounds(cls) -> int:
        try:
            rounds = int(cls.BCRYPT_ROUNDS)
        except (TypeError, ValueError):
            raise ConfigError(f"BCRYPT_ROUNDS must be an integer, got {cls.BCRYPT_ROUNDS!r}")
        if not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
            raise ConfigError(
                f"BCRYPT_ROUNDS must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}, got {rounds}"
            )
        return rounds

    @classmethod
    def validate(cls) -> None:
        """Raise ConfigError if a required setting is missing or malformed."""
        if not cls.DATABASE_URL.strip():
            raise ConfigError("DATABASE_URL is not set (environment or .env file)")
        cls.bcrypt_rounds()
