"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger and its setup helper.
Why: Provide a single canonical import path.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger

__all__ = [
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
