"""
API routers
"""

from .activity_api import router as activity_router
from .mindset_api import router as mindset_router

__all__ = [
    "activity_router",
    "mindset_router",
]
