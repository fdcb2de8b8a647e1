"""HMAC-signed access tokens handed out after login."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from roomate.models import AuthResponse, User

REFRESH_LIFETIME = timedelta(hours=24)

_SIGNING_ALGORITHM = "HS256"
_HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]
# Only expiry and not-before are checked, as the token library of the service did.
_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iat": False,
    "verify_sub": False,
    "verify_jti": False,
}


class InvalidTokenError(ValueError):
    """Raised when a token is malformed, tampered with, expired or not HMAC-signed."""

    def __init__(self, message: str = "invalid token") -> None:
        super().__init__(message)


class JwtToken:
    """Issues, verifies and refreshes HS256 tokens carrying a user's id and role."""

    def __init__(self, signature_key: str | bytes, lifetime: timedelta) -> None:
        self._key = signature_key.encode("utf-8") if isinstance(signature_key, str) else bytes(signature_key)
        self.lifetime = lifetime

    def generate_token(self, user: User) -> AuthResponse:
        """Sign a token for ``user`` valid for the configured lifetime."""
        now = datetime.now(timezone.utc)
        claims: dict[str, Any] = {}
        if user.name:
            claims["iss"] = user.name
        claims["exp"] = int((now + self.lifetime).timestamp())
        claims["iat"] = int(now.timestamp())
        claims["userId"] = user.id
        claims["role"] = user.role_name
        try:
            token = jwt.encode(claims, self._key, algorithm=_SIGNING_ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as error:
            raise ValueError("failed to generate token") from error
        return AuthResponse(token=token)

    def _decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(token, self._key, algorithms=_HMAC_ALGORITHMS, options=_DECODE_OPTIONS)
        except (jwt.PyJWTError, TypeError, ValueError) as error:
            raise InvalidTokenError() from error

    def verify_token(self, token: str) -> dict[str, Any]:
        """Return the claims of a valid token; raise InvalidTokenError otherwise."""
        return self._decode(token)

    def refresh_token(self, old_token: str) -> AuthResponse:
        """Re-sign a valid token's claims with an expiry 24 hours from now."""
        claims = self._decode(old_token)
        claims["exp"] = int(time.time() + REFRESH_LIFETIME.total_seconds())
        return AuthResponse(token=jwt.encode(claims, self._key, algorithm=_SIGNING_ALGORITHM))