"""
Page Routes for the Course Catalog.
Serves the page shell and the course spreadsheet from the public directory.
"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, HTMLResponse

from coursecatalog.core.config import settings
from coursecatalog.services.catalog_loader import CatalogLoader
from coursecatalog.services.page import render_catalog_page


router = APIRouter(tags=["Page"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/", response_class=HTMLResponse, summary="Course Catalog Page")
def catalog_page():
    """Render the institution list, the error panel or the no-data guidance."""
    result = CatalogLoader().load()
    return HTMLResponse(content=render_catalog_page(result))


@router.get(f"/{settings.workbook_filename}", summary="Course Spreadsheet")
def workbook_file():
    """Serve the course spreadsheet from the public directory."""
    path = settings.workbook_path
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")

    return FileResponse(
        path,
        media_type=XLSX_MEDIA_TYPE,
        filename=settings.workbook_filename,
    )
