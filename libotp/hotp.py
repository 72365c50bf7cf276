from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import typing_extensions

from libotp._engine import find_match, load_secret, render_code
from libotp._utils.bytes import MAX_MOVING_FACTOR
from libotp.config import HotpConfig
from libotp.errors import ConfigurationError, MovingFactorRangeError
from libotp.options import (
    USE_INTERNAL_STATE,
    ExplicitFactor,
    FactorSource,
    UseInternalState,
    resolve_factor,
)

if TYPE_CHECKING:
    from libotp._engine import SecretLike
    from libotp.algorithms import Algorithm, AlgorithmLike

__all__ = ["Hotp"]

log = logging.getLogger(__name__)


class Hotp:
    """
    Counter based one-time passwords (RFC 4226).

    The engine owns a counter which is advanced by one whenever a code is
    generated or validated against it. Passing an explicit moving factor
    bypasses the counter entirely.

    :arg secret:
        shared secret, as raw bytes or base32 text.

    :param validation_window:
        number of counter values past the current one which :meth:`validate`
        also accepts. This is a forward-looking window only, as searching
        backwards would accept codes that were already used.

    Usage example::

        >>> server = Hotp(b"12345678901234567890")
        >>> server.validate("755 224")
        True
        >>> server.counter
        1

    Instances are not safe for concurrent use; serialize access per secret.
    """

    def __init__(
        self,
        secret: SecretLike,
        *,
        algorithm: AlgorithmLike | None = None,
        digits: int | None = None,
        validation_window: int | None = None,
        counter: int | None = None,
        require_rfc_secret_length: bool | None = None,
    ) -> None:
        self._config = HotpConfig.build(
            algorithm=algorithm,
            digits=digits,
            validation_window=validation_window,
            counter=counter,
            require_rfc_secret_length=require_rfc_secret_length,
        )
        self._secret = load_secret(secret, self._config)
        self._counter = self._config.counter

    def __repr__(self) -> str:
        return (
            f"<Hotp algorithm={self.algorithm.value} digits={self.digits} "
            f"counter={self._counter}>"
        )

    @property
    def config(self) -> HotpConfig:
        return self._config

    @property
    def algorithm(self) -> Algorithm:
        return self._config.algorithm

    @property
    def digits(self) -> int:
        return self._config.digits

    @property
    def validation_window(self) -> int:
        return self._config.validation_window

    @property
    def counter(self) -> int:
        """Counter value the next code is generated / expected for."""
        return self._counter

    def reset_counter(self, counter: int = 0) -> None:
        if isinstance(counter, bool) or not isinstance(counter, int):
            raise TypeError(f"counter must be an int, not {type(counter).__name__}")
        if not 0 <= counter <= MAX_MOVING_FACTOR:
            raise ConfigurationError(f"counter out of range: {counter}")
        log.debug("hotp counter reset from %d to %d", self._counter, counter)
        self._counter = counter

    def _base(self, source: FactorSource) -> int:
        if isinstance(source, UseInternalState):
            return self._counter
        if isinstance(source, ExplicitFactor):
            return source.value
        typing_extensions.assert_never(source)

    def _exhausted(self, source: FactorSource, side_effects: bool) -> bool:
        return (
            side_effects
            and source is USE_INTERNAL_STATE
            and self._counter >= MAX_MOVING_FACTOR
        )

    def _advance(self) -> None:
        self._counter += 1
        log.debug("hotp counter advanced to %d", self._counter)

    def generate(
        self,
        factor: FactorSource | int = USE_INTERNAL_STATE,
        *,
        side_effects: bool = True,
        formatted: bool = True,
        grouping: int | None = None,
    ) -> str:
        """
        Generate the code for the current counter, or for an explicit factor.

        :arg factor:
            ``USE_INTERNAL_STATE`` (default) to use :attr:`counter`, or an
            :class:`~libotp.options.ExplicitFactor` / plain int.

        :param side_effects:
            when the internal counter is used, advance it by one afterwards.
            Ignored for explicit factors, which never touch the counter.
            Raises :exc:`~libotp.errors.MovingFactorRangeError` before any
            code is computed if the counter is already at ``2**64 - 1``.

        :param formatted:
            group digits for display (see :func:`~libotp.formatting.format_code`);
            if false, return the zero padded digits only.

        :param grouping:
            custom group size, ``0`` disables grouping.

        Usage example::

            >>> h = Hotp(b"12345678901234567890")
            >>> h.generate()
            '755 224'
            >>> h.generate(ExplicitFactor(9), formatted=False)
            '520489'
            >>> h.counter
            1
        """
        source = resolve_factor(factor)
        if self._exhausted(source, side_effects):
            raise MovingFactorRangeError("hotp counter exhausted")
        code = render_code(
            self._secret,
            self._base(source),
            self._config,
            formatted=formatted,
            grouping=grouping,
        )
        if side_effects and source is USE_INTERNAL_STATE:
            self._advance()
        return code

    def validate(
        self,
        code: str | int,
        factor: FactorSource | int = USE_INTERNAL_STATE,
        *,
        side_effects: bool = True,
        use_window: bool = True,
    ) -> bool:
        """
        Check a code against the counter (or an explicit factor) and the
        look-ahead window.

        Factors are probed in ascending order and the lowest match wins.
        Whitespace in ``code`` is ignored. A code that doesn't match, or isn't
        a well-formed code at all, yields ``False``.

        :param side_effects:
            on a match against the internal counter, advance it by one.
            If the counter is already at ``2**64 - 1`` it can't advance, so
            nothing is checked and ``False`` is returned.

        :param use_window:
            if false, only the base factor itself is probed.
        """
        source = resolve_factor(factor)
        if self._exhausted(source, side_effects):
            log.debug("hotp counter exhausted, rejecting code")
            return False
        base = self._base(source)
        upper = self.validation_window if use_window else 0
        matched = find_match(
            code, range(base, base + upper + 1), self._secret, self._config
        )
        if matched is None:
            return False
        if matched != base:
            log.debug("hotp code matched %d steps ahead", matched - base)
        if side_effects and source is USE_INTERNAL_STATE:
            self._advance()
        return True
