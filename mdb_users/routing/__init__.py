"""
HTTP routers for the user service.
"""

from .health import router as health_router
from .users import router as users_router

__all__ = ["users_router", "health_router"]
