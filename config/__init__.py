"""Configuration constants for SafeBackup.

The values live in `config.settings`; this package re-exports them so
callers can write `from config import LOG_FILENAME`. Keep new constants
in settings.py and add them to its `__all__`.
"""
from .settings import *  # noqa: F401,F403
from .settings import __all__  # noqa: F401
