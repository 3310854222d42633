import pytest

from database.errors import HashingError
from database.security import check_password, hash_password


def test_hash_then_check_roundtrip():
    hashed = hash_password("secret1", rounds=4)
    assert hashed != "secret1"
    assert hashed.startswith("$2")
    assert check_password("secret1", hashed)


def test_wrong_password_does_not_match():
    hashed = hash_password("secret1", rounds=4)
    assert not check_password("secret2", hashed)


def test_hashes_are_salted():
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


@pytest.mark.parametrize("stored", ["", "not-a-hash", "$2b$04$tooShort"])
def test_malformed_hash_returns_false(stored):
    assert check_password("secret1", stored) is False


def test_invalid_cost_raises_hashing_error():
    with pytest.raises(HashingError):
        hash_password("secret1", rounds=2)
