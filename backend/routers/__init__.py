"""
FastAPI routers for API endpoints.
"""

from .recommend import router as recommend_router
from .analyze import router as analyze_router

__all__ = [
    "recommend_router",
    "analyze_router",
]
