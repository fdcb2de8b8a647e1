import pytest

from roomate.passwords import (
    PasswordMismatchError,
    compare_password_hash,
    generate_password_hash,
    hash_password,
    verify_password,
)

password = "password"
other_password = "secret"


@pytest.mark.parametrize("hasher", [hash_password, generate_password_hash])
def test_hash_uses_default_cost(hasher):
    hashed = hasher(password)
    assert hashed.startswith("$2a$10$")
    assert len(hashed) == 60


def test_hash_is_salted():
    first = hash_password(password)
    second = hash_password(password)
    assert len({first, second}) == 2
    assert verify_password(first, password) is None
    assert verify_password(second, password) is None


def test_verify_password_round_trip():
    hashed = hash_password(password)
    assert verify_password(hashed, password) is None
    with pytest.raises(PasswordMismatchError):
        verify_password(hashed, other_password)


def test_verify_password_rejects_malformed_hash():
    with pytest.raises(ValueError):
        verify_password("not-a-hash", password)


def test_compare_password_hash_round_trip():
    hashed = generate_password_hash(password)
    assert compare_password_hash(hashed, password) is None
    with pytest.raises(PasswordMismatchError, match="not the hash of the given password"):
        compare_password_hash(hashed, other_password)


def test_compare_password_hash_turns_any_failure_into_mismatch():
    with pytest.raises(PasswordMismatchError):
        compare_password_hash("not-a-hash", password)


def test_overlong_password_is_rejected():
    long_password = password * 10
    with pytest.raises(ValueError, match="could not hash password"):
        hash_password(long_password)
    with pytest.raises(ValueError):
        generate_password_hash(long_password)