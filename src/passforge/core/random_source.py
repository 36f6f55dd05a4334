"""Cryptographically secure random draws for password generation.

Every draw goes through :func:`secrets.randbelow`, which samples from
the operating system CSPRNG and rejects out-of-range values instead of
reducing modulo *n*, so each index is exactly uniform.

:class:`SecureRandomSource` is stateless apart from its retry settings
and the OS source is safe for concurrent use, so a single instance may
be shared between threads.

Transient ``OSError`` failures of the OS source (e.g. the entropy pool
not yet initialised during early boot) are retried with exponential
backoff; callers only see :class:`EntropyUnavailableError` once every
retry has failed.
"""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

from passforge.core.errors import EntropyUnavailableError

log = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_MAX_RETRIES = 5
_DEFAULT_RETRY_DELAY = 0.01


class SecureRandomSource:
    """Bias-free uniform draws backed by :mod:`secrets`.

    Parameters
    ----------
    max_retries:
        Number of extra attempts after an ``OSError`` from the OS source.
    retry_delay_seconds:
        Base delay; attempt *n* sleeps ``retry_delay_seconds * 2**n``.

    """

    def __init__(
        self,
        max_retries: int = _DEFAULT_MAX_RETRIES,
        retry_delay_seconds: float = _DEFAULT_RETRY_DELAY,
    ) -> None:
        # bool is an int subclass but never a meaningful count
        if isinstance(max_retries, bool) or not isinstance(max_retries, int):
            msg = f"max_retries must be an integer (got {max_retries!r})"
            raise TypeError(msg)
        if isinstance(retry_delay_seconds, bool) or not isinstance(
            retry_delay_seconds,
            (int, float),
        ):
            msg = f"retry_delay_seconds must be a number (got {retry_delay_seconds!r})"
            raise TypeError(msg)
        if max_retries < 0:
            msg = f"max_retries must be >= 0 (got {max_retries})"
            raise ValueError(msg)
        if retry_delay_seconds < 0:
            msg = f"retry_delay_seconds must be >= 0 (got {retry_delay_seconds})"
            raise ValueError(msg)
        self._max_retries = max_retries
        self._retry_delay = retry_delay_seconds

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def retry_delay_seconds(self) -> float:
        return self._retry_delay

    # -- primitives ---------------------------------------------------------

    def randbelow(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``."""
        if n < 1:
            msg = f"upper bound must be >= 1 (got {n})"
            raise ValueError(msg)

        last_exc: OSError | None = None
        for attempt in range(self._max_retries + 1):
            try:
                return secrets.randbelow(n)
            except OSError as exc:
                last_exc = exc
                if attempt == self._max_retries:
                    break
                log.warning(
                    "Secure random draw attempt %d/%d failed: %s",
                    attempt + 1,
                    self._max_retries + 1,
                    exc,
                )
                time.sleep(self._retry_delay * (2**attempt))

        raise EntropyUnavailableError(self._max_retries + 1) from last_exc

    def randint(self, low: int, high: int) -> int:
        """Return a uniform integer in ``[low, high]`` (both inclusive)."""
        if high < low:
            msg = f"empty range [{low}, {high}]"
            raise ValueError(msg)
        if high == low:
            return low
        return low + self.randbelow(high - low + 1)

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of the non-empty *seq*."""
        if not seq:
            msg = "cannot choose from an empty sequence"
            raise ValueError(msg)
        return seq[self.randbelow(len(seq))]

    def choices(self, seq: Sequence[T], k: int) -> list[T]:
        """Return *k* independent draws from *seq*, with replacement."""
        if k <= 0:
            return []
        return [self.choice(seq) for _ in range(k)]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle *items* in place (Fisher-Yates, secure index draws)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]


_default_source: SecureRandomSource | None = None


def default_source() -> SecureRandomSource:
    """Return the shared process-wide source with default retry settings."""
    global _default_source  # noqa: PLW0603
    if _default_source is None:
        _default_source = SecureRandomSource()
    return _default_source
