"""Users feature: CRUD and keyset-paginated listing."""

from .router import router
from .service import UserService, get_user_service

__all__ = ["UserService", "get_user_service", "router"]
