"""Configuration subsystem for passforge.

Public API::

    from passforge.config import load_settings

    settings = load_settings("config.yaml")
    settings.policy.min_length      # typed access
"""

from passforge.config.loader import (
    ConfigValidationError,
    load_settings,
    load_settings_from_dict,
)
from passforge.config.settings import (
    LoggingSettings,
    PassforgeSettings,
    PolicySettings,
    RandomSettings,
    build_settings,
)

__all__ = [
    "ConfigValidationError",
    "LoggingSettings",
    "PassforgeSettings",
    "PolicySettings",
    "RandomSettings",
    "build_settings",
    "load_settings",
    "load_settings_from_dict",
]
