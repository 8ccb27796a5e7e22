"""
Pydantic schemas for data validation and serialization.
Covers the column layout, institution groups and the catalog load result.
"""
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from coursecatalog.core.exceptions import LayoutError

from .enums import ColumnRole, LoadStatus


# ==========================================
# COLUMN LAYOUT
# ==========================================

class ColumnLayout(BaseModel):
    """
    Maps each semantic role to a zero-based column index.

    The defaults match the published course spreadsheet:
    provider code in the 2nd column, then institution name,
    course code and course name.
    """
    provider_code: int = Field(1, ge=0)
    institution_name: int = Field(2, ge=0)
    course_code: int = Field(3, ge=0)
    course_name: int = Field(4, ge=0)
    header_rows: int = Field(2, ge=0)  # Leading rows discarded unconditionally

    @model_validator(mode='after')
    def validate_distinct_columns(self) -> 'ColumnLayout':
        """Ensure no two roles read the same column."""
        columns = [self.column_for(role) for role in ColumnRole]
        if len(set(columns)) != len(columns):
            raise ValueError("Each role must map to a distinct column")
        return self

    def column_for(self, role: ColumnRole) -> int:
        return getattr(self, role.value)

    @property
    def max_column(self) -> int:
        return max(self.column_for(role) for role in ColumnRole)

    @classmethod
    def from_headers(
        cls,
        headers: list[str],
        names: dict[ColumnRole, str],
        header_rows: int = 2
    ) -> 'ColumnLayout':
        """
        Build a layout by locating each role's header text in a header row.

        Matching is case-insensitive and ignores surrounding whitespace.
        Roles missing from ``names`` keep their default position.

        Raises:
            LayoutError: if any named header is absent from the row
        """
        positions = {
            str(header).strip().lower(): idx
            for idx, header in reversed(list(enumerate(headers)))
            if str(header).strip()
        }

        resolved = {}
        missing = []
        for role, name in names.items():
            idx = positions.get(name.strip().lower())
            if idx is None:
                missing.append(name)
            else:
                resolved[role.value] = idx

        if missing:
            raise LayoutError(
                message=f"Missing required headers: {', '.join(missing)}",
                missing_headers=missing,
                header_row=list(headers),
            )

        return cls(header_rows=header_rows, **resolved)


# ==========================================
# INSTITUTION GROUPS
# ==========================================

class InstitutionGroup(BaseModel):
    """One institution and its courses, in spreadsheet order."""
    institution_name: str = Field(..., alias="institutionName")
    courses: list[str] = []

    class Config:
        populate_by_name = True


# ==========================================
# CATALOG LOAD RESULT
# ==========================================

class CatalogResponse(BaseModel):
    """
    Result of a single catalog load.

    An empty ``universities`` list with status SUCCEEDED is the
    "no data" outcome, not a failure.
    """
    status: LoadStatus = LoadStatus.PENDING
    loading: bool = True
    universities: list[InstitutionGroup] = []
    error: Optional[str] = None
    total: int = 0

    @property
    def is_empty(self) -> bool:
        return self.status == LoadStatus.SUCCEEDED and self.total == 0

    @property
    def has_error(self) -> bool:
        return self.status == LoadStatus.FAILED

    @classmethod
    def pending(cls) -> 'CatalogResponse':
        return cls()

    @classmethod
    def succeeded(cls, universities: list[InstitutionGroup]) -> 'CatalogResponse':
        return cls(
            status=LoadStatus.SUCCEEDED,
            loading=False,
            universities=universities,
            total=len(universities),
        )

    @classmethod
    def failed(cls, message: str) -> 'CatalogResponse':
        return cls(status=LoadStatus.FAILED, loading=False, error=message)
