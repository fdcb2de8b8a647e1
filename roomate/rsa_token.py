"""RS256 tokens signed with base64-encoded PEM keys."""

from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

_RSA_ALGORITHMS = ["RS256", "RS384", "RS512"]
_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iat": False,
    "verify_sub": False,
    "verify_jti": False,
}


class TokenError(ValueError):
    """Raised when a token cannot be created or does not validate."""


def _decode_base64(value: str) -> bytes:
    return base64.b64decode(value.replace("\r", "").replace("\n", ""), validate=True)


def _load_private_key(pem: bytes) -> rsa.RSAPrivateKey:
    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (TypeError, UnsupportedAlgorithm) as error:
        raise ValueError(str(error)) from error
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ValueError("key is not a valid RSA private key")
    return key


def _load_public_key(pem: bytes) -> rsa.RSAPublicKey:
    try:
        key = serialization.load_pem_public_key(pem)
    except (ValueError, UnsupportedAlgorithm):
        try:
            key = x509.load_pem_x509_certificate(pem).public_key()
        except (ValueError, UnsupportedAlgorithm) as error:
            raise ValueError(str(error)) from error
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError("key is not a valid RSA public key")
    return key


def create_token(ttl: timedelta, payload: Any, private_key: str) -> str:
    """Sign ``payload`` as the subject of an RS256 token valid for ``ttl``."""
    try:
        pem = _decode_base64(private_key)
    except ValueError as error:
        raise TokenError(f"could not decode key: {error}") from error
    try:
        key = _load_private_key(pem)
    except ValueError as error:
        raise TokenError(f"create: parse key: {error}") from error

    now = datetime.now(timezone.utc)
    claims = {
        "sub": payload,
        "exp": int((now + ttl).timestamp()),
        "iat": int(now.timestamp()),
        "nbf": int(now.timestamp()),
    }
    try:
        return jwt.encode(claims, key, algorithm="RS256")
    except (jwt.PyJWTError, TypeError, ValueError) as error:
        raise TokenError(f"create: sign token: {error}") from error


def validate_token(token: str, public_key: str) -> Any:
    """Return the subject of an RSA-signed token; raise TokenError if it does not validate."""
    try:
        pem = _decode_base64(public_key)
    except ValueError as error:
        raise TokenError(f"could not decode {error}") from error
    try:
        key = _load_public_key(pem)
    except ValueError as error:
        raise TokenError(f"validate: parse key: {error}") from error

    try:
        algorithm = jwt.get_unverified_header(token).get("alg")
    except jwt.PyJWTError as error:
        raise TokenError(f"validate: {error}") from error
    if algorithm not in _RSA_ALGORITHMS:
        raise TokenError(f"validate: unexpected method: {algorithm}")

    try:
        claims = jwt.decode(token, key, algorithms=_RSA_ALGORITHMS, options=_DECODE_OPTIONS)
    except jwt.PyJWTError as error:
        raise TokenError(f"validate: {error}") from error
    return claims.get("sub")