"""
Workbook parser for the Course Catalog.
Turns the course spreadsheet into institution groups.

Only the first worksheet is read. Rows are projected positionally:
the first ``header_rows`` projected rows are dropped without inspection,
and each remaining row contributes one course to the group keyed by
"<institution> (<provider code>)".
"""
import io
import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Optional

import pandas as pd
from openpyxl.utils import range_boundaries

from coursecatalog.core.exceptions import EmptyWorkbookError, ParseError
from coursecatalog.models.enums import ColumnRole
from coursecatalog.models.schemas import ColumnLayout, InstitutionGroup


logger = logging.getLogger(__name__)

# Range assumed for worksheets that do not declare one
DEFAULT_RANGE_REF = "A1"

RowRecord = dict[int, str]


@dataclass(frozen=True)
class CellRange:
    """Zero-based, inclusive bounds of a worksheet's occupied range."""
    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def rows(self) -> range:
        return range(self.min_row, self.max_row + 1)

    @property
    def columns(self) -> range:
        return range(self.min_col, self.max_col + 1)


def decode_range(ref: Optional[str]) -> CellRange:
    """
    Decode an A1-style reference ("A1:E120" or "B2") into a CellRange.

    An empty or missing reference falls back to the single cell A1.
    """
    ref = (ref or "").strip() or DEFAULT_RANGE_REF
    try:
        min_col, min_row, max_col, max_row = range_boundaries(ref)
    except (ValueError, TypeError) as e:
        raise ParseError(
            message=f"Invalid worksheet range '{ref}'",
            original_error=str(e)
        )

    # Whole-column / whole-row references leave one side open
    min_col = min_col or 1
    min_row = min_row or 1
    max_col = max_col or min_col
    max_row = max_row or min_row

    return CellRange(
        min_row=min_row - 1,
        max_row=max_row - 1,
        min_col=min_col - 1,
        max_col=max_col - 1,
    )


def clean_cell(value: Any) -> str:
    """
    Coerce a raw cell value to its display string ("" when absent).

    Text is kept verbatim, whitespace included. Dates render as ISO dates
    (with the time only when it is not midnight), booleans as TRUE/FALSE,
    and integral numbers without a trailing ".0".
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if pd.isna(value):
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def group_rows(
    records: list[RowRecord],
    layout: Optional[ColumnLayout] = None
) -> list[InstitutionGroup]:
    """
    Group data rows into institutions.

    Rows without an institution name or a course name are skipped.
    Groups keep first-seen order; courses keep row order.
    """
    layout = layout or ColumnLayout()
    groups: dict[str, list[str]] = {}

    for position, record in enumerate(records):
        institution_name = record.get(layout.column_for(ColumnRole.INSTITUTION_NAME), "")
        course_name = record.get(layout.column_for(ColumnRole.COURSE_NAME), "")
        course_code = record.get(layout.column_for(ColumnRole.COURSE_CODE), "")
        provider_code = record.get(layout.column_for(ColumnRole.PROVIDER_CODE), "")

        if not institution_name or not course_name:
            logger.debug(
                f"Skipping row {position}: institution={institution_name!r}, "
                f"course={course_name!r}"
            )
            continue

        full_institution_name = f"{institution_name} ({provider_code})"
        groups.setdefault(full_institution_name, []).append(
            f"{course_name} ({course_code})"
        )

    return [
        InstitutionGroup(institution_name=name, courses=courses)
        for name, courses in groups.items()
    ]


class WorkbookParser:
    """
    Parser for the course spreadsheet.

    Expected layout (first worksheet, zero-based columns):
    - Column 1: Provider code
    - Column 2: Institution name
    - Column 3: Course code
    - Column 4: Course name

    Row 0 holds header text, row 1 a secondary header; data starts at row 2.
    """

    def __init__(
        self,
        data: bytes,
        filename: str = "aus-uni.xlsx",
        layout: Optional[ColumnLayout] = None,
        header_names: Optional[dict[ColumnRole, str]] = None,
        header_row: int = 0
    ):
        """
        Initialize parser with file content.

        Args:
            data: Raw workbook bytes
            filename: Original filename for error messages
            layout: Column layout, defaults to the positional layout
            header_names: Header text per role; when given, role columns are
                located in ``header_row`` instead of taken from ``layout``
            header_row: Zero-based row holding the header text
        """
        self.data = data
        self.filename = filename
        self.layout = layout or ColumnLayout()
        self.header_names = header_names
        self.header_row = header_row
        self._excel_file: Optional[pd.ExcelFile] = None
        self._frame: Optional[pd.DataFrame] = None
        self._range: Optional[CellRange] = None

    def _load_excel(self) -> pd.ExcelFile:
        """Load the workbook into memory."""
        if self._excel_file is None:
            try:
                self._excel_file = pd.ExcelFile(io.BytesIO(self.data), engine="openpyxl")
            except Exception as e:
                raise ParseError(
                    message=f"Failed to read Excel file: {str(e)}",
                    file_name=self.filename,
                    original_error=type(e).__name__
                )
        return self._excel_file

    @property
    def sheet_name(self) -> str:
        """Name of the first worksheet."""
        excel = self._load_excel()
        logger.debug(f"Available sheets: {excel.sheet_names}")

        if not excel.sheet_names:
            raise EmptyWorkbookError(file_name=self.filename)
        return excel.sheet_names[0]

    def declared_range(self) -> CellRange:
        """Decode the first worksheet's declared occupied range."""
        if self._range is None:
            sheet_name = self.sheet_name
            worksheet = self._load_excel().book[sheet_name]

            try:
                ref = worksheet.calculate_dimension()
            except ValueError:
                # Read-only worksheets without a <dimension> element are unsized
                ref = None

            logger.debug(f"Worksheet '{sheet_name}' range: {ref or DEFAULT_RANGE_REF}")
            self._range = decode_range(ref)
        return self._range

    def _load_frame(self) -> pd.DataFrame:
        """Read the first worksheet as a headerless grid."""
        if self._frame is None:
            # Reading the sheet resets read-only dimensions, so decode them first
            self.declared_range()
            sheet_name = self.sheet_name
            try:
                self._frame = self._load_excel().parse(
                    sheet_name,
                    header=None,
                    dtype=object,
                    keep_default_na=False,
                )
            except Exception as e:
                raise ParseError(
                    message=f"Failed to read worksheet: {str(e)}",
                    file_name=self.filename,
                    sheet_name=sheet_name,
                    original_error=type(e).__name__
                )
        return self._frame

    def _cell(self, row: int, col: int) -> str:
        frame = self._load_frame()
        if row >= frame.shape[0] or col >= frame.shape[1]:
            return ""
        return clean_cell(frame.iat[row, col])

    def read_headers(self, row: int = 0) -> list[str]:
        """
        Read one header row, indexed by absolute column.

        Columns left of the declared span read as "". Under the positional
        layout headers are diagnostic only.
        """
        cell_range = self.declared_range()
        headers = [self._cell(row, col) for col in range(cell_range.max_col + 1)]
        logger.debug(f"Excel headers (row {row}): {headers}")
        return headers

    def project_rows(self) -> list[RowRecord]:
        """
        Project every row of the declared range into a record keyed by
        column index. Every declared column is present.
        """
        cell_range = self.declared_range()
        return [
            {col: self._cell(row, col) for col in cell_range.columns}
            for row in cell_range.rows
        ]

    def resolve_layout(self) -> ColumnLayout:
        """
        Locate the role columns by header text when header names are given.

        Raises:
            LayoutError: if a named header is missing from ``header_row``
        """
        if self.header_names:
            self.layout = ColumnLayout.from_headers(
                self.read_headers(self.header_row),
                self.header_names,
                header_rows=self.layout.header_rows
            )
            logger.info(f"Resolved column layout from headers: {self.layout}")
        else:
            self.read_headers()
        return self.layout

    def parse(self) -> list[InstitutionGroup]:
        """
        Parse the workbook into institution groups.

        Returns:
            Groups in first-seen order, each with courses in row order.
        """
        layout = self.resolve_layout()
        records = self.project_rows()
        data_rows = records[layout.header_rows:]

        groups = group_rows(data_rows, layout)
        logger.info(
            f"Parsed {self.filename}: {len(data_rows)} data rows, "
            f"{len(groups)} institutions"
        )
        return groups


def extract_institutions(
    data: bytes,
    layout: Optional[ColumnLayout] = None,
    filename: str = "aus-uni.xlsx",
    header_names: Optional[dict[ColumnRole, str]] = None,
    header_row: int = 0
) -> list[InstitutionGroup]:
    """Parse workbook bytes into institution groups."""
    return WorkbookParser(
        data,
        filename=filename,
        layout=layout,
        header_names=header_names,
        header_row=header_row
    ).parse()
