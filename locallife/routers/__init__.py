"""
LocalLife API Routers

FastAPI routers split by domain.
"""

from .health import router as health_router
from .insights import router as insights_router
from .stats import router as stats_router

__all__ = [
    "health_router",
    "insights_router",
    "stats_router",
]
