"""Password hashing with bcrypt at the default cost."""

import bcrypt

DEFAULT_COST = 10
_MAX_PASSWORD_BYTES = 72


class PasswordMismatchError(ValueError):
    """Raised when a password does not match its hash."""

    def __init__(self, message: str = "crypto/bcrypt: hashedPassword is not the hash of the given password") -> None:
        super().__init__(message)


def _hash(password: str) -> str:
    raw = password.encode()
    if len(raw) > _MAX_PASSWORD_BYTES:
        raise ValueError("bcrypt: password length exceeds 72 bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=DEFAULT_COST, prefix=b"2a")).decode("ascii")


def hash_password(password: str) -> str:
    """Hash ``password``; raise ValueError if it cannot be hashed."""
    try:
        return _hash(password)
    except ValueError as error:
        raise ValueError(f"could not hash password {error}") from error


def verify_password(hashed_password: str, candidate_password: str) -> None:
    """Raise PasswordMismatchError unless the candidate matches the hash.

    A malformed hash raises ValueError.
    """
    if not bcrypt.checkpw(candidate_password.encode(), hashed_password.encode()):
        raise PasswordMismatchError()


def generate_password_hash(password: str) -> str:
    """Hash ``password``; raise ValueError if it cannot be hashed."""
    return _hash(password)


def compare_password_hash(hashed_password: str, password: str) -> None:
    """Raise PasswordMismatchError unless the password matches; any failure counts as a mismatch."""
    try:
        verify_password(hashed_password, password)
    except ValueError as error:
        raise PasswordMismatchError() from error