__all__ = [
    "OtpError",
    "ConfigurationError",
    "SecretTooShortError",
    "SecretDecodeError",
    "MovingFactorRangeError",
    "InvalidDigestError",
    "OtpSecurityWarning",
]


class OtpError(Exception):
    """Base class for all errors raised by libotp."""


class ConfigurationError(OtpError, ValueError):
    """
    Raised when an engine, config or helper receives an option it can't use.

    These are raised at the point of misuse and are never retried internally.
    """


class SecretTooShortError(ConfigurationError):
    """Secret is shorter than the RFC 4226 minimum of 16 bytes."""

    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(f"secret must be at least {minimum} bytes, got {length}")


class SecretDecodeError(ConfigurationError):
    """Secret text is not valid base32."""


class MovingFactorRangeError(OtpError, ValueError):
    """Moving factor is negative or doesn't fit into 8 bytes."""


class InvalidDigestError(OtpError, RuntimeError):
    """
    Digest is too short for dynamic truncation.

    Unreachable for SHA-1 / SHA-256 / SHA-512 digests.
    """


class OtpSecurityWarning(UserWarning):
    """Issued when an engine is configured in a way that weakens its security."""
