# API Routes
from .catalog_routes import router as catalog_router
from .page_routes import router as page_router

__all__ = [
    "catalog_router",
    "page_router",
]
