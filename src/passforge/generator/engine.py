"""Password generation engine.

One :meth:`PasswordGenerator.generate` call:

1. picks the total length uniformly from ``[min_length, max_length]``;
2. draws the guaranteed minimum from each class (lower, upper,
   numeric, special);
3. fills the remainder from the pooled characters;
4. shuffles the whole buffer with a secure Fisher-Yates pass.

Every draw, including the shuffle swaps, uses the same
:class:`~passforge.core.random_source.SecureRandomSource`.  Without
the shuffle the guaranteed characters would always lead the password
in class order.

Usage::

    from passforge import PasswordGenerator, generate_password

    generate_password()        # 12..24 chars, 2 of each class
    generate_password(16)      # exactly 16 chars

    gen = PasswordGenerator(min_length=16, max_length=24, min_special=4)
    gen.generate()
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any

from passforge.core.charsets import CHARACTER_CLASSES
from passforge.core.random_source import SecureRandomSource, default_source
from passforge.generator.config import GeneratorConfig

if TYPE_CHECKING:
    from passforge.config.settings import PolicySettings, RandomSettings

log = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate passwords for one fixed :class:`GeneratorConfig`.

    Pass either a ready *config* or the individual parameters as
    keyword arguments (``min_length``, ``max_length``, ``min_lower``,
    ``min_upper``, ``min_numeric``, ``min_special``).  Instances hold
    no mutable state and may be shared between threads.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        random_source: SecureRandomSource | None = None,
        **params: Any,
    ) -> None:
        if config is not None and params:
            msg = "pass either config or individual parameters, not both"
            raise TypeError(msg)
        self._config = config if config is not None else GeneratorConfig(**params)
        self._random = random_source if random_source is not None else default_source()

    @classmethod
    def from_settings(
        cls,
        policy: PolicySettings,
        random_settings: RandomSettings | None = None,
    ) -> PasswordGenerator:
        """Build a generator from the typed settings tree."""
        source = None
        if random_settings is not None:
            source = SecureRandomSource(**dataclasses.asdict(random_settings))
        return cls(GeneratorConfig(**dataclasses.asdict(policy)), random_source=source)

    # -- read-only parameters ------------------------------------------------

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def random_source(self) -> SecureRandomSource:
        return self._random

    @property
    def min_length(self) -> int:
        return self._config.min_length

    @property
    def max_length(self) -> int:
        return self._config.max_length

    @property
    def min_lower(self) -> int:
        return self._config.min_lower

    @property
    def min_upper(self) -> int:
        return self._config.min_upper

    @property
    def min_numeric(self) -> int:
        return self._config.min_numeric

    @property
    def min_special(self) -> int:
        return self._config.min_special

    # -- generation ----------------------------------------------------------

    def generate(self) -> str:
        """Return a new password satisfying the configuration."""
        cfg = self._config
        rng = self._random

        target_length = rng.randint(cfg.min_length, cfg.max_length)

        chars: list[str] = []
        for kind, minimum in cfg.minimums():
            chars.extend(rng.choices(CHARACTER_CLASSES[kind].chars, minimum))

        filler_count = target_length - len(chars)
        chars.extend(rng.choices(cfg.pooled_chars, filler_count))

        rng.shuffle(chars)

        log.debug(
            "Generated password",
            extra={
                "length": target_length,
                "guaranteed": cfg.required_minimum,
                "filler": filler_count,
            },
        )
        return "".join(chars)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"


# ---------------------------------------------------------------------------
# Convenience entry points
# ---------------------------------------------------------------------------


def generate(
    config: GeneratorConfig,
    *,
    random_source: SecureRandomSource | None = None,
) -> str:
    """Generate one password for *config*."""
    return PasswordGenerator(config, random_source=random_source).generate()


def generate_with_defaults() -> str:
    """Generate one password with the default parameters (12-24 chars, 2 per class)."""
    return PasswordGenerator().generate()


def generate_with_length(length: int) -> str:
    """Generate one password of exactly *length* characters, 2 per class."""
    return PasswordGenerator(min_length=length, max_length=length).generate()


def generate_password(length: int | None = None) -> str:
    """Generate one password, of fixed *length* when given, else with defaults."""
    if length is None:
        return generate_with_defaults()
    return generate_with_length(length)
