"""Validated, immutable parameters for one password generator.

Usage::

    from passforge.generator.config import GeneratorConfig

    cfg = GeneratorConfig(min_length=16, max_length=24, min_special=4)
    cfg.pooled_chars    # characters eligible for filler draws
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from passforge.core.charsets import CHARACTER_CLASSES
from passforge.core.errors import InvalidParameter
from passforge.core.types import CHAR_CLASS_ORDER, CharClass

log = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 12
DEFAULT_MAX_LENGTH = 24
DEFAULT_MIN_PER_CLASS = 2

_MINIMUM_FIELDS: tuple[tuple[str, CharClass], ...] = (
    ("min_lower", CharClass.LOWER),
    ("min_upper", CharClass.UPPER),
    ("min_numeric", CharClass.NUMERIC),
    ("min_special", CharClass.SPECIAL),
)


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(name, f"must be an integer (got {value!r})")


@dataclass(frozen=True)
class GeneratorConfig:
    """Length bounds and per-class minimums for password generation.

    Validation runs on construction and raises :class:`InvalidParameter`
    naming the first offending field.  A ``max_length`` below
    ``min_length`` is raised to ``min_length`` instead of rejected.

    ``pooled_chars`` holds every class with a non-zero minimum, or all
    four classes when every minimum is zero.
    """

    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    min_lower: int = DEFAULT_MIN_PER_CLASS
    min_upper: int = DEFAULT_MIN_PER_CLASS
    min_numeric: int = DEFAULT_MIN_PER_CLASS
    min_special: int = DEFAULT_MIN_PER_CLASS
    required_minimum: int = field(init=False, repr=False)
    pooled_chars: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _require_int("min_length", self.min_length)
        if self.min_length < 1:
            raise InvalidParameter(
                "min_length",
                f"cannot be smaller than 1 (got {self.min_length})",
            )

        for name, _kind in _MINIMUM_FIELDS:
            value = getattr(self, name)
            _require_int(name, value)
            if value < 0:
                raise InvalidParameter(name, f"cannot be smaller than 0 (got {value})")

        _require_int("max_length", self.max_length)
        if self.min_length > self.max_length:
            log.debug(
                "max_length %d raised to min_length %d",
                self.max_length,
                self.min_length,
            )
            object.__setattr__(self, "max_length", self.min_length)

        required = self.min_lower + self.min_upper + self.min_numeric + self.min_special
        if self.min_length < required:
            raise InvalidParameter(
                "min_length",
                f"cannot be smaller than the sum of the per-class minimums "
                f"({self.min_length} < {required})",
            )

        object.__setattr__(self, "required_minimum", required)
        object.__setattr__(self, "pooled_chars", self._pool(required))

    def _pool(self, required: int) -> str:
        return "".join(
            CHARACTER_CLASSES[kind].chars
            for name, kind in _MINIMUM_FIELDS
            if required == 0 or getattr(self, name) > 0
        )

    def minimum_for(self, kind: CharClass | str) -> int:
        """Return the configured minimum count for character class *kind*."""
        kind = CharClass(kind)
        for name, field_kind in _MINIMUM_FIELDS:
            if field_kind is kind:
                return getattr(self, name)
        msg = f"unknown character class {kind!r}"  # pragma: no cover
        raise ValueError(msg)  # pragma: no cover

    def minimums(self) -> tuple[tuple[CharClass, int], ...]:
        """Return ``(class, minimum)`` pairs in draw order."""
        return tuple((kind, self.minimum_for(kind)) for kind in CHAR_CLASS_ORDER)

    def to_dict(self) -> dict[str, int]:
        """Return the six constructor parameters as a plain dict."""
        return {
            "min_length": self.min_length,
            "max_length": self.max_length,
            "min_lower": self.min_lower,
            "min_upper": self.min_upper,
            "min_numeric": self.min_numeric,
            "min_special": self.min_special,
        }
