"""
Fully resolved engine configuration.

Each engine builds one frozen config at construction from the library defaults
and the caller's overrides; every field is validated here, once.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Optional, TypeVar

from libotp._utils.bytes import MAX_MOVING_FACTOR
from libotp.algorithms import Algorithm, lookup_algorithm
from libotp.errors import ConfigurationError
from libotp.formatting import canonical_code

__all__ = [
    "DEFAULT_DIGITS",
    "DEFAULT_HOTP_VALIDATION_WINDOW",
    "DEFAULT_TOTP_VALIDATION_WINDOW",
    "DEFAULT_STEP_SIZE",
    "OtpConfig",
    "HotpConfig",
    "TotpConfig",
]

DEFAULT_DIGITS = 6

#: Look-ahead for HOTP counter resynchronization. A larger window tolerates more
#: unused codes on the client, at the cost of more codes accepted per attempt.
DEFAULT_HOTP_VALIDATION_WINDOW = 100

#: Time steps accepted on either side of the current one.
DEFAULT_TOTP_VALIDATION_WINDOW = 1

DEFAULT_STEP_SIZE = 30

#: 31-bit truncated values never have more than 10 decimal digits
MAX_DIGITS = 10

_TConfig = TypeVar("_TConfig", bound="OtpConfig")


def _check_int(
    value: Any, name: str, minimum: int, maximum: int | None = None
) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, not {type(value).__name__}"
        raise ConfigurationError(msg)
    if maximum is None and value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and not minimum <= value <= maximum:
        msg = f"{name} must be between {minimum} - {maximum}, got {value}"
        raise ConfigurationError(msg)


@dataclasses.dataclass(frozen=True)
class OtpConfig:
    algorithm: Algorithm = Algorithm.SHA1
    digits: int = DEFAULT_DIGITS
    validation_window: int = 0
    require_rfc_secret_length: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", lookup_algorithm(self.algorithm))
        _check_int(self.digits, "digits", 1, MAX_DIGITS)
        _check_int(self.validation_window, "validation_window", 0)

    @classmethod
    def build(cls: type[_TConfig], **overrides: Any) -> _TConfig:
        """
        Merge library defaults with ``overrides``.

        ``None`` values are treated as "use the default".
        """
        names = {field.name for field in dataclasses.fields(cls)}
        unknown = set(overrides) - names
        if unknown:
            raise TypeError(f"unknown {cls.__name__} options: {sorted(unknown)}")
        return cls(**{k: v for k, v in overrides.items() if v is not None})


@dataclasses.dataclass(frozen=True)
class HotpConfig(OtpConfig):
    validation_window: int = DEFAULT_HOTP_VALIDATION_WINDOW
    counter: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_int(self.counter, "counter", 0, MAX_MOVING_FACTOR)


@dataclasses.dataclass(frozen=True)
class TotpConfig(OtpConfig):
    validation_window: int = DEFAULT_TOTP_VALIDATION_WINDOW
    step_size: int = DEFAULT_STEP_SIZE
    last_validated_code: Optional[str] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_int(self.step_size, "step_size", 1)
        if self.last_validated_code is not None:
            object.__setattr__(
                self,
                "last_validated_code",
                canonical_code(self.last_validated_code, self.digits),
            )
