"""Password generator configuration and engine.

Public API::

    from passforge.generator import GeneratorConfig, PasswordGenerator
"""

from passforge.generator.config import GeneratorConfig
from passforge.generator.engine import (
    PasswordGenerator,
    generate,
    generate_password,
    generate_with_defaults,
    generate_with_length,
)

__all__ = [
    "GeneratorConfig",
    "PasswordGenerator",
    "generate",
    "generate_password",
    "generate_with_defaults",
    "generate_with_length",
]
