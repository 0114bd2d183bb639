"""Observability setup."""

from observability.logfire_config import LogfireConfig

__all__ = ["LogfireConfig"]
