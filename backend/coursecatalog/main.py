"""
FastAPI Main Application Entry Point for the Course Catalog.

Serves:
- The course spreadsheet at its well-known path
- Institution groups parsed from the spreadsheet (JSON)
- The page shell with expandable course lists
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from coursecatalog.core.config import settings
from coursecatalog.core.exceptions import CatalogException
from coursecatalog.api.routes import catalog_router, page_router


# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup and shutdown."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Workbook source: {settings.workbook_url or settings.workbook_path}")

    if not settings.workbook_url and not settings.workbook_path.is_file():
        logger.warning(f"Workbook not found at {settings.workbook_path}")

    yield

    logger.info("Shutting down...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    # Course Catalog

    Groups the courses listed in the course spreadsheet by institution.

    ## Spreadsheet Layout
    First worksheet only. Rows 0-1 are headers; data starts at row 2.
    - **Column 1**: Provider code
    - **Column 2**: Institution name
    - **Column 3**: Course code
    - **Column 4**: Course name

    ## API Response Structure
    ```json
    {
      "status": "succeeded",
      "loading": false,
      "universities": [
        {"institutionName": "Acme Uni (00123)", "courses": ["Intro CS (CS101)"]}
      ],
      "error": null,
      "total": 1
    }
    ```
    """,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# Configure CORS for frontend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler for CatalogExceptions
@app.exception_handler(CatalogException)
async def catalog_exception_handler(request, exc: CatalogException):
    """Handle all CatalogException subclasses."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


# Include API routers
app.include_router(catalog_router)
app.include_router(page_router)


# Health check endpoint
@app.get("/health", tags=["System"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "debug": settings.debug,
        "workbook_source": settings.workbook_url or str(settings.workbook_path),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "coursecatalog.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
