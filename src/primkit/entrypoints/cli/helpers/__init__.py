"""Helpers shared by the PRIMKIT CLI commands."""

from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = ["error", "parse_log_level", "warn"]
