import pytest

from libotp.algorithms import Algorithm
from libotp.errors import (
    ConfigurationError,
    MovingFactorRangeError,
    OtpSecurityWarning,
    SecretTooShortError,
)
from libotp.hotp import Hotp
from libotp.options import USE_INTERNAL_STATE, ExplicitFactor
from libotp.secret import generate_base32_secret, validate_secret
from tests.vectors import HOTP_CODES, RFC_SECRET_SHA1, RFC_SECRET_SHA1_B32


@pytest.mark.parametrize("secret", [RFC_SECRET_SHA1, RFC_SECRET_SHA1_B32])
def test_secret_bytes_or_base32(secret) -> None:
    hotp = Hotp(secret)
    assert hotp.generate(0, side_effects=False) == "755 224"


@pytest.mark.parametrize(("counter", "code"), list(enumerate(HOTP_CODES)))
def test_generate_rfc4226(hotp: Hotp, counter: int, code: str) -> None:
    assert hotp.generate(ExplicitFactor(counter), formatted=False) == code
    assert hotp.generate(counter, grouping=3) == f"{code[:3]} {code[3:]}"
    assert hotp.counter == 0


def test_generate_is_deterministic(hotp: Hotp) -> None:
    other = Hotp(RFC_SECRET_SHA1)
    assert hotp.generate(1234) == other.generate(1234) == hotp.generate(1234)


def test_generate_increments_counter(hotp: Hotp) -> None:
    assert hotp.counter == 0
    assert hotp.generate() == "755 224"
    assert hotp.counter == 1

    # explicit factors never touch the counter
    hotp.generate(ExplicitFactor(5))
    assert hotp.counter == 1

    hotp.generate(side_effects=False)
    assert hotp.counter == 1

    assert hotp.generate(USE_INTERNAL_STATE) == "287 082"
    assert hotp.counter == 2


def test_generate_formatting(hotp: Hotp) -> None:
    assert hotp.generate(0, grouping=0) == "755224"
    assert hotp.generate(0, grouping=2) == "75 52 24"
    assert hotp.generate(0, formatted=False) == "755224"


def test_generate_eight_digits() -> None:
    hotp = Hotp(RFC_SECRET_SHA1, digits=8)
    # RFC 4226 truncated value 1284755224
    assert hotp.generate(0) == "8475 5224"


def test_generate_moving_factor_out_of_range(hotp: Hotp) -> None:
    with pytest.raises(MovingFactorRangeError):
        hotp.generate(2**64)


def test_generate_rejects_bad_factor(hotp: Hotp) -> None:
    with pytest.raises(TypeError):
        hotp.generate(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        hotp.generate(True)


def test_validate_increments_counter(hotp: Hotp) -> None:
    assert hotp.validate("755 224")
    assert hotp.counter == 1

    assert hotp.validate("755 224", 0, side_effects=False, use_window=False)
    assert hotp.counter == 1

    # explicit factor
    assert hotp.validate("287082", ExplicitFactor(1))
    assert hotp.counter == 1


def test_validate_failure_keeps_counter(hotp: Hotp) -> None:
    assert not hotp.validate("000000", use_window=False)
    assert hotp.counter == 0


def test_validate_ignores_whitespace_and_accepts_int(hotp: Hotp) -> None:
    assert hotp.validate(" 755\t224 ", side_effects=False)
    assert hotp.validate(755224, side_effects=False)


@pytest.mark.parametrize("code", ["", "abcdef", "75522", "7552240", "755-224"])
def test_validate_malformed(hotp: Hotp, code: str) -> None:
    assert not hotp.validate(code)
    assert hotp.counter == 0


def test_validate_look_ahead_window(hotp: Hotp) -> None:
    code_at_0 = hotp.generate(0)
    assert hotp.validate(code_at_0, side_effects=False)

    code_at_100 = hotp.generate(100)
    assert hotp.validate(code_at_100, side_effects=False)

    code_at_101 = hotp.generate(101)
    assert not hotp.validate(code_at_101, side_effects=False)


def test_validate_zero_window() -> None:
    hotp = Hotp(RFC_SECRET_SHA1, validation_window=0)
    assert hotp.validate(hotp.generate(0), side_effects=False)
    assert not hotp.validate(hotp.generate(1), side_effects=False)


def test_validate_window_disabled(hotp: Hotp) -> None:
    code_at_0 = hotp.generate(0)
    code_at_1 = hotp.generate(1)
    assert code_at_0 != code_at_1
    assert hotp.counter == 0

    assert hotp.validate(code_at_0, side_effects=False, use_window=False)
    assert not hotp.validate(code_at_1, side_effects=False, use_window=False)
    assert not hotp.validate(code_at_1, 0, side_effects=False, use_window=False)
    assert hotp.validate(code_at_1, 1, side_effects=False, use_window=False)
    assert not hotp.validate(code_at_1, 2, side_effects=False, use_window=False)


def test_validate_is_forward_only() -> None:
    hotp = Hotp(RFC_SECRET_SHA1, counter=5, validation_window=3)
    for counter in range(5):
        assert not hotp.validate(HOTP_CODES[counter], side_effects=False)
    for counter in range(5, 9):
        assert hotp.validate(HOTP_CODES[counter], side_effects=False)
    assert not hotp.validate(HOTP_CODES[9], side_effects=False)


def test_validate_near_max_counter() -> None:
    hotp = Hotp(RFC_SECRET_SHA1, counter=2**64 - 1)
    code = hotp.generate(side_effects=False)
    assert hotp.validate(code, side_effects=False)


def test_validate_exhausted_counter() -> None:
    hotp = Hotp(RFC_SECRET_SHA1, counter=2**64 - 1)
    code = hotp.generate(side_effects=False)
    assert not hotp.validate(code)
    assert hotp.counter == 2**64 - 1
    assert hotp.validate(code, ExplicitFactor(2**64 - 1))


def test_generate_exhausted_counter() -> None:
    hotp = Hotp(RFC_SECRET_SHA1, counter=2**64 - 1)
    with pytest.raises(MovingFactorRangeError):
        hotp.generate()
    assert hotp.counter == 2**64 - 1
    assert hotp.generate(side_effects=False) == hotp.generate(2**64 - 1)


def test_reset_counter(hotp: Hotp) -> None:
    hotp.reset_counter(42)
    assert hotp.counter == 42
    hotp.reset_counter()
    assert hotp.counter == 0
    with pytest.raises(ConfigurationError):
        hotp.reset_counter(-1)
    with pytest.raises(TypeError):
        hotp.reset_counter("1")  # type: ignore[arg-type]


def test_initial_counter() -> None:
    hotp = Hotp(RFC_SECRET_SHA1, counter=9)
    assert hotp.generate() == "520 489"
    assert hotp.counter == 10


def test_auth_flow() -> None:
    server = Hotp(RFC_SECRET_SHA1, validation_window=5)
    client = Hotp(RFC_SECRET_SHA1_B32)

    code = client.generate()
    assert server.validate(code)
    # one time use
    assert not server.validate(code)

    # client generated codes the server never saw
    client.reset_counter(client.counter + 3)
    assert server.validate(client.generate())
    assert server.counter == 2


def test_auth_flow_generated_secret() -> None:
    secret = generate_base32_secret()
    assert validate_secret(secret)
    server = Hotp(secret, require_rfc_secret_length=True)
    client = Hotp(secret)
    assert server.validate(client.generate())
    assert server.counter == client.counter == 1


def test_config_and_attrs() -> None:
    hotp = Hotp(RFC_SECRET_SHA1, algorithm="sha256", digits=8, validation_window=10)
    assert hotp.algorithm is Algorithm.SHA256
    assert hotp.digits == 8
    assert hotp.validation_window == 10
    assert hotp.config.counter == 0
    assert "12345678901234567890" not in repr(hotp)


def test_empty_secret() -> None:
    with pytest.raises(ConfigurationError, match="empty"):
        Hotp(b"")


def test_secret_type() -> None:
    with pytest.raises(TypeError):
        Hotp(12345)  # type: ignore[arg-type]


def test_short_secret_warns() -> None:
    with pytest.warns(OtpSecurityWarning):
        Hotp(b"short")


def test_short_secret_enforced() -> None:
    with pytest.raises(SecretTooShortError) as exc_info:
        Hotp(b"0123456789", require_rfc_secret_length=True)
    assert exc_info.value.length == 10
    Hotp(b"0123456789abcdef", require_rfc_secret_length=True)
