"""
Catalog API Routes for the Course Catalog.
Exposes the grouped institution data loaded from the course spreadsheet.
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from coursecatalog.models.schemas import CatalogResponse
from coursecatalog.services.catalog_loader import CatalogLoader


router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get(
    "/universities",
    response_model=CatalogResponse,
    summary="List Universities",
    description="""
    Fetch the course spreadsheet and group its courses by institution.

    **States:**
    - `succeeded`: `universities` holds the groups (may be empty: "no data")
    - `failed`: `error` holds a human-readable message; the HTTP status
      reflects the failure (502 fetch, 422 unreadable workbook or
      missing header when header matching is enabled)
    """
)
def list_universities():
    """
    Run a fresh catalog load.

    Declared without ``async`` so the blocking fetch runs in the threadpool.
    """
    loader = CatalogLoader()
    result = loader.load()

    if result.has_error:
        status_code = loader.error.status_code if loader.error else 500
        return JSONResponse(
            status_code=status_code,
            content=result.model_dump(mode="json", by_alias=True),
        )

    return result
