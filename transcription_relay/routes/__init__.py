"""Route exports."""

from .health import router as health_router
from .index import router as index_router
from .transcribe import router as transcribe_router

__all__ = ["health_router", "index_router", "transcribe_router"]
