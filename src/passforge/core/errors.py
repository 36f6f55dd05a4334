"""Exception types raised by passforge.

Usage::

    raise InvalidParameter("min_length", "must be at least 1")
"""

from __future__ import annotations


class InvalidParameter(ValueError):
    """A generator parameter failed validation.

    Parameters
    ----------
    parameter:
        Name of the offending parameter (e.g. ``"min_upper"``).
    reason:
        Human-readable explanation of the problem.

    """

    def __init__(self, parameter: str, reason: str) -> None:
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"{parameter}: {reason}")


class EntropyUnavailableError(RuntimeError):
    """The operating system random source kept failing after all retries."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Secure random source unavailable after {attempts} attempts",
        )
