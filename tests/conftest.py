import pytest

from libotp.hotp import Hotp
from tests.vectors import RFC_SECRET_SHA1


@pytest.fixture
def hotp() -> Hotp:
    return Hotp(RFC_SECRET_SHA1)
