# security.py
import bcrypt

from database.errors import HashingError

DEFAULT_ROUNDS = 12


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Return a salted bcrypt hash for `password`. The salt and cost are
    embedded in the result, so it can be stored and verified later as is.
    """
    try:
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    except (ValueError, TypeError) as e:
        raise HashingError(f"could not hash password: {e}") from e


def check_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        # malformed stored hash or password bcrypt refuses
        return False
