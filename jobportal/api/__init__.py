"""
API package.
"""
from jobportal.api.routes import api_router
from jobportal.api.deps import get_current_user_id

__all__ = [
    "api_router",
    "get_current_user_id",
]
