"""Character-class registry.

The four classes are built once at import time and exposed through a
read-only mapping.  Visually ambiguous glyphs (``I l O 0``) are never
part of any class, and the special class omits ``< > &`` so generated
passwords can be embedded in XML without escaping.

Access pattern::

    from passforge.core.charsets import CHARACTER_CLASSES
    from passforge.core.types import CharClass

    CHARACTER_CLASSES[CharClass.NUMERIC].chars   # "23456789"
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from passforge.core.types import CHAR_CLASS_ORDER, CharClass

# Ambiguous glyphs plus XML-unsafe characters; no class may contain these.
EXCLUDED_CHARS = frozenset("IlO0<>&")


def char_range(first: str, last: str, exclude: str = "") -> str:
    """Return every character from *first* to *last* inclusive, minus *exclude*."""
    return "".join(
        chr(code) for code in range(ord(first), ord(last) + 1) if chr(code) not in exclude
    )


@dataclass(frozen=True)
class CharacterClass:
    """A named, ordered, immutable set of allowed characters."""

    kind: CharClass
    chars: str

    def __len__(self) -> int:
        return len(self.chars)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.chars


# ---------------------------------------------------------------------------
# Process-wide class definitions
# ---------------------------------------------------------------------------

LOWERCASE_CHARS = char_range("a", "z", exclude="l")
UPPERCASE_CHARS = char_range("A", "Z", exclude="IO")
NUMERIC_CHARS = char_range("2", "9")
SPECIAL_CHARS = "!#%*()$?+-="

CHARACTER_CLASSES: MappingProxyType[CharClass, CharacterClass] = MappingProxyType(
    {
        CharClass.LOWER: CharacterClass(CharClass.LOWER, LOWERCASE_CHARS),
        CharClass.UPPER: CharacterClass(CharClass.UPPER, UPPERCASE_CHARS),
        CharClass.NUMERIC: CharacterClass(CharClass.NUMERIC, NUMERIC_CHARS),
        CharClass.SPECIAL: CharacterClass(CharClass.SPECIAL, SPECIAL_CHARS),
    }
)

ALL_CHARS = "".join(CHARACTER_CLASSES[kind].chars for kind in CHAR_CLASS_ORDER)


def get_character_class(kind: CharClass | str) -> CharacterClass:
    """Return the registered class for *kind*.

    Accepts either a :class:`CharClass` member or its string value.
    Raises :class:`ValueError` for unknown names.
    """
    return CHARACTER_CLASSES[CharClass(kind)]


def classify(char: str) -> CharClass | None:
    """Return the class *char* belongs to, or ``None`` if it is not allowed."""
    for kind in CHAR_CLASS_ORDER:
        if char in CHARACTER_CLASSES[kind]:
            return kind
    return None
