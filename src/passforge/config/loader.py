"""passforge settings loader.

Lifecycle::

    # 1. Load and validate a YAML file
    settings = load_settings("/etc/passforge/config.yaml")

    # 2. Or validate an in-memory dict (tests, embedding applications)
    settings = load_settings_from_dict({"policy": {"min_length": 16}})

    # 3. Build a generator from the typed tree
    PasswordGenerator.from_settings(settings.policy, settings.random)

String values of the form ``${VAR}`` or ``${VAR:-default}`` are
replaced from the environment **before** schema validation, so
substituted values are checked against the schema too.
"""

from __future__ import annotations

import copy
import dataclasses
import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from passforge.config.settings import PassforgeSettings, build_settings
from passforge.core.errors import InvalidParameter
from passforge.core.random_source import SecureRandomSource
from passforge.generator.config import GeneratorConfig

_SCHEMA_PATH = Path(__file__).parent / "schema.json"

_ENV_RE = re.compile(
    r"^\$\{([^}:]+?)(?::-(.*))?\}$",
    re.DOTALL,
)
_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+)([eE][+-]?\d+)?$")

log = logging.getLogger(__name__)

_schema_validator: Draft202012Validator | None = None


def _get_validator() -> Draft202012Validator:
    """Return the bundled schema validator, loading it on first use."""
    global _schema_validator  # noqa: PLW0603
    if _schema_validator is None:
        schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
        _schema_validator = Draft202012Validator(schema)
    return _schema_validator


# ---------------------------------------------------------------------------
# Validation error collector
# ---------------------------------------------------------------------------


class ConfigValidationError(Exception):
    """Raised when loading or validation finds one or more problems."""

    def __init__(self, errors: list[str]) -> None:
        """Store *errors* and build a human-readable message."""
        self.errors = errors
        body = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Configuration validation failed:\n{body}")


# ---------------------------------------------------------------------------
# Environment variable resolution
# ---------------------------------------------------------------------------


def _coerce_scalar(value: str) -> str | int | float:
    """Turn numeric-looking substituted strings into numbers."""
    if _INT_RE.match(value):
        return int(value)
    if _FLOAT_RE.match(value):
        return float(value)
    return value


def _resolve_value(value: str, path: str) -> str | int | float:
    """Replace ``${VAR}`` or ``${VAR:-default}`` with env var value."""
    match = _ENV_RE.match(value)
    if match is None:
        return value
    var_name = match.group(1)
    fallback = match.group(2)
    resolved = os.environ.get(var_name)
    if resolved is not None:
        return _coerce_scalar(resolved)
    if fallback is not None:
        return _coerce_scalar(fallback)
    raise ConfigValidationError(
        [
            f"Environment variable '${{{var_name}}}' referenced "
            f"at '{path}' is not set and has no default",
        ],
    )


def _resolve_env_vars(
    data: Any,  # noqa: ANN401
    path: str = "",
) -> None:
    """Walk *data* in-place and resolve ``${VAR}``/``${VAR:-default}`` strings."""
    if isinstance(data, dict):
        for key in data:
            child_path = f"{path}.{key}" if path else key
            if isinstance(data[key], str):
                data[key] = _resolve_value(data[key], child_path)
            elif isinstance(data[key], (dict, list)):
                _resolve_env_vars(data[key], child_path)
    elif isinstance(data, list):
        for idx, item in enumerate(data):
            child_path = f"{path}[{idx}]"
            if isinstance(item, str):
                data[idx] = _resolve_value(item, child_path)
            elif isinstance(item, (dict, list)):
                _resolve_env_vars(item, child_path)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _schema_errors(data: dict) -> list[str]:
    errors = []
    for err in sorted(_get_validator().iter_errors(data), key=lambda e: list(e.path)):
        location = ".".join(str(p) for p in err.path) or "<root>"
        errors.append(f"{location}: {err.message}")
    return errors


def _check_policy(settings: PassforgeSettings) -> list[str]:
    """Cross-field check: the policy must build a valid generator config."""
    p = settings.policy
    try:
        cfg = GeneratorConfig(**dataclasses.asdict(p))
    except InvalidParameter as exc:
        return [f"policy.{exc.parameter}: {exc.reason}"]
    if cfg.max_length != p.max_length:
        log.warning(
            "policy.max_length (%d) is below policy.min_length; using %d",
            p.max_length,
            cfg.max_length,
        )
    return []


def _check_random(settings: PassforgeSettings) -> list[str]:
    """Cross-field check: the random settings must build a working source."""
    try:
        SecureRandomSource(**dataclasses.asdict(settings.random))
    except (TypeError, ValueError) as exc:
        return [f"random: {exc}"]
    return []


def load_settings_from_dict(data: dict | None) -> PassforgeSettings:
    """Validate a raw config mapping and return the typed settings tree.

    *data* is copied before env-var resolution; the caller's dict is
    left untouched.
    """
    raw = copy.deepcopy(data) if data is not None else {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(["<root>: configuration must be a mapping"])

    _resolve_env_vars(raw)

    errors = _schema_errors(raw)
    if errors:
        raise ConfigValidationError(errors)

    settings = build_settings(raw)

    errors = _check_policy(settings) + _check_random(settings)
    if errors:
        raise ConfigValidationError(errors)

    return settings


def load_settings(config_file: str | Path) -> PassforgeSettings:
    """Load, resolve and validate a YAML (or JSON) configuration file."""
    path = Path(config_file)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigValidationError([f"cannot read {path}: {exc}"]) from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigValidationError([f"cannot parse {path}: {exc}"]) from exc

    if data is not None and not isinstance(data, dict):
        raise ConfigValidationError(["<root>: configuration must be a mapping"])

    log.debug("Loaded configuration from %s", path)
    return load_settings_from_dict(data)
