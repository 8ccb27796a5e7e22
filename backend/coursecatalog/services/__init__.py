# Services - Business Logic Layer
"""
Course Catalog Services Module.

This module provides:
- Workbook retrieval
- Workbook parsing and institution grouping
- Catalog load state
- Page rendering
"""

from .parser import (
    WorkbookParser,
    extract_institutions,
)
from .source import WorkbookSource
from .catalog_loader import (
    CatalogLoader,
    header_names_from_settings,
    layout_from_settings,
    load_catalog,
)
from .page import render_catalog_page


__all__ = [
    # Parsing
    "WorkbookParser",
    "extract_institutions",

    # Source
    "WorkbookSource",

    # Loading
    "CatalogLoader",
    "header_names_from_settings",
    "layout_from_settings",
    "load_catalog",

    # Page
    "render_catalog_page",
]
