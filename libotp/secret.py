from __future__ import annotations

import secrets

from libotp._utils import base32
from libotp.errors import SecretDecodeError, SecretTooShortError

__all__ = [
    "RFC_MIN_SECRET_SIZE",
    "DEFAULT_SECRET_SIZE",
    "decode_secret",
    "encode_secret",
    "validate_secret",
    "generate_secret",
    "generate_base32_secret",
]

#: RFC 4226 section 4, requirement 6
RFC_MIN_SECRET_SIZE = 16

#: RFC 4226 recommends 160 bit secrets
DEFAULT_SECRET_SIZE = 20


def decode_secret(text: str) -> bytes:
    return base32.b32decode(text)


def encode_secret(secret: bytes) -> str:
    return base32.b32encode(secret)


def validate_secret(text: str, ignore_length: bool = True) -> bool:
    """
    Check a base32 secret uses the RFC 4648 base32 alphabet
    (not the "Extended Hex" one) and decodes to a non-empty secret.

    RFC 4226 requires at least 16 bytes, but Google Authenticator has long
    accepted shorter secrets and many services issue them, so the length is
    only checked when ``ignore_length`` is false.
    """
    padded = base32.pad(text)
    if not base32.is_base32(padded):
        return False
    try:
        secret = base32.b32decode(padded)
    except SecretDecodeError:
        return False
    if not secret:
        return False
    return ignore_length or len(secret) >= RFC_MIN_SECRET_SIZE


def generate_secret(
    length: int = DEFAULT_SECRET_SIZE, *, allow_short: bool = False
) -> bytes:
    if length < RFC_MIN_SECRET_SIZE and not allow_short:
        raise SecretTooShortError(length, RFC_MIN_SECRET_SIZE)
    return secrets.token_bytes(length)


def generate_base32_secret(
    length: int = DEFAULT_SECRET_SIZE, *, allow_short: bool = False
) -> str:
    return encode_secret(generate_secret(length, allow_short=allow_short))
