from __future__ import annotations

import hmac
import logging
import time as _time
from typing import TYPE_CHECKING

from libotp import moving_factor
from libotp._engine import find_match, load_secret, render_code
from libotp.config import TotpConfig
from libotp.formatting import canonical_code

if TYPE_CHECKING:
    from libotp._engine import SecretLike
    from libotp.algorithms import Algorithm, AlgorithmLike
    from libotp.moving_factor import Clock, TimeLike

__all__ = ["Totp"]

log = logging.getLogger(__name__)


class Totp:
    """
    Time based one-time passwords (RFC 6238).

    The moving factor is the time step ``floor(time / step_size)``. There is
    no counter to advance, so single use is enforced by remembering the last
    accepted code and rejecting it when it's submitted again.

    :arg secret:
        shared secret, as raw bytes or base32 text.

    :param validation_window:
        number of time steps (not seconds) accepted on either side of the
        current one, to tolerate clock skew in both directions.

    :param step_size:
        length of a time step in seconds.

    :param last_validated_code:
        replay marker restored from a previous engine.

    :param now:
        clock returning seconds since the epoch, defaults to :func:`time.time`.

    Usage example::

        >>> t = Totp(b"12345678901234567890", digits=8)
        >>> t.generate(59)
        '9428 7082'
        >>> t.validate("94287082", 59)
        True
        >>> t.validate("94287082", 59)
        False

    Instances are not safe for concurrent use; serialize access per secret.
    """

    def __init__(
        self,
        secret: SecretLike,
        *,
        algorithm: AlgorithmLike | None = None,
        digits: int | None = None,
        validation_window: int | None = None,
        step_size: int | None = None,
        last_validated_code: str | None = None,
        require_rfc_secret_length: bool | None = None,
        now: Clock = _time.time,
    ) -> None:
        self._config = TotpConfig.build(
            algorithm=algorithm,
            digits=digits,
            validation_window=validation_window,
            step_size=step_size,
            last_validated_code=last_validated_code,
            require_rfc_secret_length=require_rfc_secret_length,
        )
        self._secret = load_secret(secret, self._config)
        self._last_validated_code = self._config.last_validated_code
        self._now = now

    def __repr__(self) -> str:
        return (
            f"<Totp algorithm={self.algorithm.value} digits={self.digits} "
            f"step_size={self.step_size}>"
        )

    @property
    def config(self) -> TotpConfig:
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
    def step_size(self) -> int:
        return self._config.step_size

    @property
    def last_validated_code(self) -> str | None:
        return self._last_validated_code

    def time_step(self, at_time: TimeLike | None = None) -> int:
        return moving_factor.time_step(self.step_size, at_time, now=self._now)

    def generate(
        self,
        at_time: TimeLike | None = None,
        *,
        formatted: bool = True,
        grouping: int | None = None,
    ) -> str:
        """
        Generate the code for the time step containing ``at_time`` (default: now).

        Repeated calls within one time step return the same code.
        """
        return render_code(
            self._secret,
            self.time_step(at_time),
            self._config,
            formatted=formatted,
            grouping=grouping,
        )

    def validate(
        self,
        code: str | int,
        at_time: TimeLike | None = None,
        *,
        side_effects: bool = True,
        use_window: bool = True,
    ) -> bool:
        """
        Check a code against the time step containing ``at_time`` (default: now).

        With ``use_window``, steps ``base - window .. base + window`` are
        probed in ascending order, skipping negative steps. A matching code
        equal to :attr:`last_validated_code` is rejected as a replay.

        :param side_effects:
            on acceptance, remember the code derived at the matched step so it
            can't be accepted again.

        :param use_window:
            on by default, so codes from neighbouring steps are accepted
            unless this is passed as false; then only the step containing
            ``at_time`` is checked.
        """
        base = self.time_step(at_time)
        window = self.validation_window if use_window else 0
        matched = find_match(
            code, range(base - window, base + window + 1), self._secret, self._config
        )
        if matched is None:
            return False
        if self._is_replay(code):
            log.debug("totp code rejected, already used")
            return False
        if matched != base:
            log.debug("totp code matched %+d steps from current", matched - base)
        if side_effects:
            self._last_validated_code = render_code(
                self._secret, matched, self._config, formatted=False
            )
        return True

    def _is_replay(self, code: str | int) -> bool:
        if self._last_validated_code is None:
            return False
        submitted = canonical_code(code, self.digits)
        return hmac.compare_digest(
            submitted.encode("ascii"), self._last_validated_code.encode("utf8")
        )

    def seconds_until_next_window(self, at_time: TimeLike | None = None) -> int:
        return moving_factor.seconds_until_next_window(
            self.step_size, at_time, now=self._now
        )
