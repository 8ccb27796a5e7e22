# Core modules - Config, Exceptions
from .config import settings, get_settings
from .exceptions import (
    CatalogException,
    FetchError,
    ParseError,
    EmptyWorkbookError,
    LayoutError,
)

__all__ = [
    "settings",
    "get_settings",
    "CatalogException",
    "FetchError",
    "ParseError",
    "EmptyWorkbookError",
    "LayoutError",
]
