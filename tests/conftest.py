"""Root conftest for the passforge test suite."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
import yaml

# ---------------------------------------------------------------------------
# Make ``src/`` importable without installing the package
# ---------------------------------------------------------------------------
_SRC = str(Path(__file__).resolve().parent.parent / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


# ---------------------------------------------------------------------------
# Config data shared by multiple test modules
# ---------------------------------------------------------------------------


@pytest.fixture()
def policy_config_data() -> dict:
    """Return a complete, valid config dict."""
    return {
        "policy": {
            "min_length": 16,
            "max_length": 24,
            "min_lower": 2,
            "min_upper": 2,
            "min_numeric": 2,
            "min_special": 2,
        },
        "random": {"max_retries": 3, "retry_delay_seconds": 0},
        "logging": {"level": "DEBUG", "format": "json"},
    }


@pytest.fixture()
def tmp_config_file(tmp_path: Path, policy_config_data: dict) -> Path:
    """Write *policy_config_data* to a temp YAML file and return its path."""
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        yaml.safe_dump(policy_config_data, default_flow_style=False, sort_keys=False),
        encoding="utf-8",
    )
    return cfg


# ---------------------------------------------------------------------------
# Logger cleanup, autouse so configure_logging never leaks between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def fresh_logger():
    """Restore the ``passforge`` logger after every test."""
    logger = logging.getLogger("passforge")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
