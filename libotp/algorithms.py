from __future__ import annotations

import enum
from typing import Union

import typing_extensions
from cryptography.hazmat.primitives import hashes

from libotp.errors import ConfigurationError

__all__ = ["Algorithm", "AlgorithmLike", "lookup_algorithm"]


class Algorithm(str, enum.Enum):
    """HMAC hash functions permitted by RFC 6238."""

    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA512 = "SHA-512"

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        if self is Algorithm.SHA1:
            return hashes.SHA1()
        if self is Algorithm.SHA256:
            return hashes.SHA256()
        if self is Algorithm.SHA512:
            return hashes.SHA512()
        typing_extensions.assert_never(self)


AlgorithmLike = Union[Algorithm, str]

_ALIASES = {
    "sha1": Algorithm.SHA1,
    "sha256": Algorithm.SHA256,
    "sha512": Algorithm.SHA512,
}


def lookup_algorithm(value: AlgorithmLike) -> Algorithm:
    """
    normalize an algorithm given as :class:`Algorithm`, its value (``"SHA-256"``)
    or a hashlib-style name (``"sha256"``).
    """
    if isinstance(value, Algorithm):
        return value
    try:
        return Algorithm(value.upper())
    except ValueError:
        pass
    try:
        return _ALIASES[value.lower().replace("-", "")]
    except KeyError:
        raise ConfigurationError(f"unknown hash algorithm: {value!r}") from None
