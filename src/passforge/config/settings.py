"""Typed, frozen dataclasses for every configuration section.

This module is the **single source of truth** for default values.
JSON Schema defaults exist only for documentation; these builders
are what the library actually reads.

Access pattern::

    from passforge.config import load_settings

    settings = load_settings("passforge.yaml")
    settings.policy.min_length
"""

from __future__ import annotations

from dataclasses import dataclass

from passforge.generator.config import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_MIN_PER_CLASS,
)

# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PolicySettings:
    """Password composition policy (length bounds, per-class minimums)."""

    min_length: int
    max_length: int
    min_lower: int
    min_upper: int
    min_numeric: int
    min_special: int


def _build_policy(data: dict | None) -> PolicySettings:
    d = data or {}
    return PolicySettings(
        min_length=d.get("min_length", DEFAULT_MIN_LENGTH),
        max_length=d.get("max_length", DEFAULT_MAX_LENGTH),
        min_lower=d.get("min_lower", DEFAULT_MIN_PER_CLASS),
        min_upper=d.get("min_upper", DEFAULT_MIN_PER_CLASS),
        min_numeric=d.get("min_numeric", DEFAULT_MIN_PER_CLASS),
        min_special=d.get("min_special", DEFAULT_MIN_PER_CLASS),
    )


# ---------------------------------------------------------------------------
# Random source
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RandomSettings:
    """Retry behaviour for transient OS random source failures."""

    max_retries: int
    retry_delay_seconds: float


def _build_random(data: dict | None) -> RandomSettings:
    d = data or {}
    return RandomSettings(
        max_retries=d.get("max_retries", 5),
        retry_delay_seconds=d.get("retry_delay_seconds", 0.01),
    )


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingSettings:
    """Library logging configuration (level, format)."""

    level: str
    format: str


def _build_logging(data: dict | None) -> LoggingSettings:
    d = data or {}
    return LoggingSettings(
        level=d.get("level", "INFO"),
        format=d.get("format", "text"),
    )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PassforgeSettings:
    """Root settings tree."""

    policy: PolicySettings
    random: RandomSettings
    logging: LoggingSettings


def build_settings(data: dict | None) -> PassforgeSettings:
    """Build the full settings tree from a raw (validated) config dict."""
    d = data or {}
    return PassforgeSettings(
        policy=_build_policy(d.get("policy")),
        random=_build_random(d.get("random")),
        logging=_build_logging(d.get("logging")),
    )
