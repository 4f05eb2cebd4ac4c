"""API routers."""

from .credentials import router as credentials_router
from .pages import router as pages_router
from .upload import router as upload_router

__all__ = ["credentials_router", "pages_router", "upload_router"]
