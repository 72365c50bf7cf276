import re

_WHITESPACE_RE = re.compile(r"\s+")


def clean_user_input(value: str) -> str:
    """
    strip all whitespace and convert to upper case
    """
    return _WHITESPACE_RE.sub("", value).upper()
