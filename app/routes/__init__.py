"""Route handlers."""

from .audit import router as audit_router
from .compilation import router as compilation_router
from .health import router as health_router
from .update import router as update_router

__all__ = ["health_router", "audit_router", "compilation_router", "update_router"]
