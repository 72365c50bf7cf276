"""
Explicit source of the HOTP moving factor.

``USE_INTERNAL_STATE`` reads (and may advance) the engine's counter;
``ExplicitFactor(n)`` uses ``n`` and never touches engine state.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Union

__all__ = [
    "UseInternalState",
    "USE_INTERNAL_STATE",
    "ExplicitFactor",
    "FactorSource",
    "resolve_factor",
]


class UseInternalState(enum.Enum):
    USE_INTERNAL_STATE = "use_internal_state"

    def __repr__(self) -> str:
        return "USE_INTERNAL_STATE"


USE_INTERNAL_STATE = UseInternalState.USE_INTERNAL_STATE


@dataclasses.dataclass(frozen=True)
class ExplicitFactor:
    value: int


FactorSource = Union[UseInternalState, ExplicitFactor]


def resolve_factor(source: FactorSource | int) -> FactorSource:
    """Plain ints are shorthand for :class:`ExplicitFactor`."""
    if isinstance(source, bool):
        raise TypeError("moving factor must be an int, not bool")
    if isinstance(source, int):
        return ExplicitFactor(source)
    if not isinstance(source, (UseInternalState, ExplicitFactor)):
        raise TypeError(f"unsupported moving factor source: {source!r}")
    return source
