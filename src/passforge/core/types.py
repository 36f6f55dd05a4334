"""Enumerated types shared across passforge.

:class:`CharClass` inherits from ``StrEnum`` so members compare equal to
their plain string value, which keeps settings files and log output
readable.
"""

from __future__ import annotations

from enum import StrEnum

# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------


class CharClass(StrEnum):
    LOWER = "lower"
    UPPER = "upper"
    NUMERIC = "numeric"
    SPECIAL = "special"


# Order in which guaranteed characters are drawn and classes are pooled.
CHAR_CLASS_ORDER: tuple[CharClass, ...] = (
    CharClass.LOWER,
    CharClass.UPPER,
    CharClass.NUMERIC,
    CharClass.SPECIAL,
)
