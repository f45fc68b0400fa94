"""
adiparse configuration.

Pydantic-based settings loaded from ADIPARSE_* environment variables and an
optional .env file.
"""

from adiparse.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
