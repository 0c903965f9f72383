"""Core configuration and shared infrastructure."""

from src.core.config import Settings, get_settings
from src.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from src.core.limiter import limiter, search_rate_limit

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "limiter",
    "search_rate_limit",
]
