"""
Custom exceptions for the Course Catalog application.
Provides meaningful error types for different failure scenarios.
"""
from typing import Any, Optional


class CatalogException(Exception):
    """Base exception for all Course Catalog errors."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API response."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class FetchError(CatalogException):
    """Raised when the workbook resource cannot be retrieved."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        upstream_status: Optional[int] = None,
        reason: Optional[str] = None
    ):
        details = {}
        if source:
            details["source"] = source
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        if reason:
            details["reason"] = reason

        super().__init__(message, details, status_code=502)
        self.upstream_status = upstream_status


class ParseError(CatalogException):
    """Raised when the byte buffer is not a readable workbook."""

    def __init__(
        self,
        message: str,
        file_name: Optional[str] = None,
        sheet_name: Optional[str] = None,
        original_error: Optional[str] = None
    ):
        details = {}
        if file_name:
            details["file_name"] = file_name
        if sheet_name:
            details["sheet_name"] = sheet_name
        if original_error:
            details["original_error"] = original_error

        super().__init__(message, details, status_code=422)


class EmptyWorkbookError(ParseError):
    """Raised when a workbook contains no worksheets."""

    def __init__(
        self,
        message: str = "Workbook contains no worksheets",
        file_name: Optional[str] = None
    ):
        super().__init__(message, file_name=file_name)
        self.details["sheet_count"] = 0


class LayoutError(CatalogException):
    """Raised when a header-driven column layout cannot be resolved."""

    def __init__(
        self,
        message: str,
        missing_headers: list[str],
        header_row: Optional[list[str]] = None
    ):
        details = {
            "missing_headers": missing_headers,
        }
        if header_row is not None:
            details["header_row"] = header_row

        super().__init__(message, details, status_code=422)
