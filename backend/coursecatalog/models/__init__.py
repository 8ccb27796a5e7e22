# Data models - Enums and Pydantic Schemas
from .enums import (
    LoadStatus,
    ColumnRole,
)
from .schemas import (
    ColumnLayout,
    InstitutionGroup,
    CatalogResponse,
)

__all__ = [
    # Enums
    "LoadStatus",
    "ColumnRole",
    # Schemas
    "ColumnLayout",
    "InstitutionGroup",
    "CatalogResponse",
]
