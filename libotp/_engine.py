"""Pure helpers composed by both engines."""

from __future__ import annotations

import hmac
import warnings
from typing import TYPE_CHECKING, Union

from libotp._utils.bytes import MAX_MOVING_FACTOR
from libotp.digest import derive_code
from libotp.errors import ConfigurationError, OtpSecurityWarning, SecretTooShortError
from libotp.formatting import canonical_code, format_code
from libotp.secret import RFC_MIN_SECRET_SIZE, decode_secret

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libotp.config import OtpConfig

SecretLike = Union[bytes, bytearray, str]

#: below this size secrets are accepted with a warning when length isn't enforced
WARN_SECRET_SIZE = 10


def load_secret(secret: SecretLike, config: OtpConfig) -> bytes:
    """
    Decode a base32 text secret (raw bytes are used as-is) and check its size.
    """
    if isinstance(secret, str):
        key = decode_secret(secret)
    elif isinstance(secret, (bytes, bytearray)):
        key = bytes(secret)
    else:
        raise TypeError(f"secret must be bytes or str, not {type(secret).__name__}")
    if not key:
        raise ConfigurationError("secret must not be empty")
    if config.require_rfc_secret_length:
        if len(key) < RFC_MIN_SECRET_SIZE:
            raise SecretTooShortError(len(key), RFC_MIN_SECRET_SIZE)
    elif len(key) < WARN_SECRET_SIZE:
        warnings.warn(
            f"for security purposes, secret should be >= {WARN_SECRET_SIZE} bytes",
            OtpSecurityWarning,
            stacklevel=3,
        )
    return key


def render_code(
    secret: bytes,
    moving_factor: int,
    config: OtpConfig,
    *,
    formatted: bool = True,
    grouping: int | None = None,
) -> str:
    code = derive_code(
        secret, moving_factor, algorithm=config.algorithm, digits=config.digits
    )
    if formatted:
        return format_code(code, config.digits, grouping)
    return canonical_code(code, config.digits)


def find_match(
    code: str | int,
    candidates: Iterable[int],
    secret: bytes,
    config: OtpConfig,
) -> int | None:
    """
    Return the first moving factor in ``candidates`` whose code equals ``code``,
    ignoring formatting. Factors outside ``[0, 2**64 - 1]`` are skipped.
    """
    submitted = canonical_code(code, config.digits)
    well_formed = submitted.isascii() and submitted.isdigit()
    if not well_formed or len(submitted) != config.digits:
        return None
    expected = submitted.encode("ascii")
    for factor in candidates:
        if factor < 0 or factor > MAX_MOVING_FACTOR:
            continue
        value = render_code(secret, factor, config, formatted=False)
        if hmac.compare_digest(expected, value.encode("ascii")):
            return factor
    return None
