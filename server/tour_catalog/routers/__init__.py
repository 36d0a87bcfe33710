"""FastAPI routers package."""

from .metrics import router as metrics_router
from .tour import router as tour_router

__all__ = [
    "metrics_router",
    "tour_router",
]
