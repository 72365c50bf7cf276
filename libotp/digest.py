"""
RFC 4226 code derivation: HMAC over the moving factor, then dynamic truncation.

These are pure functions shared by the HOTP and TOTP engines.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hmac

from libotp._utils.bytes import int_to_bytes, uint32_be
from libotp.algorithms import Algorithm
from libotp.errors import InvalidDigestError

__all__ = ["hmac_digest", "extract_code", "derive_code"]


def hmac_digest(moving_factor: int, secret: bytes, algorithm: Algorithm) -> bytes:
    """
    Compute the keyed hash of a moving factor.

    :arg moving_factor:
        counter value (HOTP) or time step (TOTP), in range ``[0, 2**64 - 1]``.

    :arg secret:
        shared secret, used as the HMAC key.

    :arg algorithm:
        hash function to use.

    :raises ~libotp.errors.MovingFactorRangeError:
        if the moving factor does not fit into 8 bytes.

    :returns:
        20, 32 or 64 byte digest, depending on the algorithm.
    """
    message = int_to_bytes(moving_factor)
    mac = hmac.HMAC(secret, algorithm.hash_algorithm())
    mac.update(message)
    return mac.finalize()


def extract_code(digest: bytes, digits: int) -> int:
    """
    Dynamic truncation (RFC 4226 section 5.3) of a digest to a ``digits`` long
    decimal code.
    """
    if not digest:
        raise InvalidDigestError("digest is empty")
    # 4-bit mask keeps offset + 4 within SHA-1's 20 byte digest
    offset = digest[-1] & 0x0F
    if len(digest) < offset + 4:
        msg = f"digest of {len(digest)} bytes too short for offset {offset}"
        raise InvalidDigestError(msg)
    value = uint32_be(digest[offset : offset + 4]) & 0x7FFFFFFF
    return value % 10**digits


def derive_code(
    secret: bytes,
    moving_factor: int,
    *,
    algorithm: Algorithm,
    digits: int,
) -> int:
    return extract_code(hmac_digest(moving_factor, secret, algorithm), digits)
