"""API routers."""

from credential_service.presentation.routers.auth import router as auth_router
from credential_service.presentation.routers.system import router as system_router

__all__ = ["auth_router", "system_router"]
