"""Logging subsystem for passforge.

Public API::

    from passforge.logging import configure_logging

    configure_logging(settings.logging)
"""

from passforge.logging.setup import configure_logging

__all__ = ["configure_logging"]
