from __future__ import annotations

import base64
import binascii
import re

from libotp._utils.str import clean_user_input
from libotp.errors import SecretDecodeError

#: RFC 4648 section 6 alphabet, plus padding.
#: "Extended Hex" (section 7) adds 0,1,8,9 and is not accepted.
_BASE32_RE = re.compile(r"[A-Z2-7=]*")


def pad(text: str) -> str:
    """
    clean user input and pad it with ``=`` to a multiple of 8 chars
    """
    text = clean_user_input(text)
    return text + "=" * (-len(text) % 8)


def is_base32(text: str) -> bool:
    return _BASE32_RE.fullmatch(text) is not None


def b32decode(text: str) -> bytes:
    """
    wrapper around :func:`base64.b32decode` which is case-insensitive,
    ignores whitespace and inserts missing padding.
    """
    try:
        return base64.b32decode(pad(text), casefold=True)
    except (binascii.Error, ValueError) as err:
        raise SecretDecodeError(f"invalid base32 secret: {err}") from err


def b32encode(data: bytes) -> str:
    """
    wrapper around :func:`base64.b32encode` which strips padding,
    and returns a native string.
    """
    return base64.b32encode(data).rstrip(b"=").decode("ascii")
