"""libotp - HOTP (RFC 4226) and TOTP (RFC 6238) one-time passwords"""

from libotp.algorithms import Algorithm
from libotp.config import HotpConfig, TotpConfig
from libotp.digest import derive_code, extract_code, hmac_digest
from libotp.errors import (
    ConfigurationError,
    InvalidDigestError,
    MovingFactorRangeError,
    OtpError,
    OtpSecurityWarning,
    SecretDecodeError,
    SecretTooShortError,
)
from libotp.formatting import canonical_code, format_code
from libotp.hotp import Hotp
from libotp.moving_factor import seconds_until_next_window, time_step
from libotp.options import USE_INTERNAL_STATE, ExplicitFactor
from libotp.secret import (
    decode_secret,
    encode_secret,
    generate_base32_secret,
    generate_secret,
    validate_secret,
)
from libotp.totp import Totp

__version__ = "0.3.0"

__all__ = [
    "Algorithm",
    "ConfigurationError",
    "ExplicitFactor",
    "Hotp",
    "HotpConfig",
    "InvalidDigestError",
    "MovingFactorRangeError",
    "OtpError",
    "OtpSecurityWarning",
    "SecretDecodeError",
    "SecretTooShortError",
    "Totp",
    "TotpConfig",
    "USE_INTERNAL_STATE",
    "canonical_code",
    "decode_secret",
    "derive_code",
    "encode_secret",
    "extract_code",
    "format_code",
    "generate_base32_secret",
    "generate_secret",
    "hmac_digest",
    "seconds_until_next_window",
    "time_step",
    "validate_secret",
]
