"""passforge: composition-constrained secure password generation.

Usage::

    from passforge import PasswordGenerator, generate_password

    generate_password()          # 12..24 chars, >= 2 of each class
    generate_password(16)        # exactly 16 chars

    gen = PasswordGenerator(min_length=20, max_length=20, min_special=0)
    gen.generate()
"""

from passforge.core.charsets import (
    CHARACTER_CLASSES,
    EXCLUDED_CHARS,
    LOWERCASE_CHARS,
    NUMERIC_CHARS,
    SPECIAL_CHARS,
    UPPERCASE_CHARS,
    CharacterClass,
    classify,
    get_character_class,
)
from passforge.core.errors import EntropyUnavailableError, InvalidParameter
from passforge.core.random_source import SecureRandomSource
from passforge.core.types import CharClass
from passforge.generator import (
    GeneratorConfig,
    PasswordGenerator,
    generate,
    generate_password,
    generate_with_defaults,
    generate_with_length,
)

__version__ = "1.0.0"

__all__ = [
    "CHARACTER_CLASSES",
    "EXCLUDED_CHARS",
    "LOWERCASE_CHARS",
    "NUMERIC_CHARS",
    "SPECIAL_CHARS",
    "UPPERCASE_CHARS",
    "CharClass",
    "CharacterClass",
    "EntropyUnavailableError",
    "GeneratorConfig",
    "InvalidParameter",
    "PasswordGenerator",
    "SecureRandomSource",
    "__version__",
    "classify",
    "generate",
    "generate_password",
    "generate_with_defaults",
    "generate_with_length",
    "get_character_class",
]
