# Parser services - Workbook parsing and grouping
from .workbook_parser import (
    WorkbookParser,
    CellRange,
    decode_range,
    group_rows,
    extract_institutions,
)

__all__ = [
    "WorkbookParser",
    "CellRange",
    "decode_range",
    "group_rows",
    "extract_institutions",
]
