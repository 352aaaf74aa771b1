"""Base service class for business logic."""

from __future__ import annotations

import logging

from kickstart_service.infra.logging import get_lazy_logger


class BaseService:
    """Base class for all service classes.

    Loggers:
        - self.logger: Standard logger for INFO/WARNING/ERROR (always evaluated)
        - self._lazy: Lazy logger for DEBUG (zero overhead when DEBUG disabled)

    Example:
        class UserService(BaseService):
            async def get_user(self, session, user_id: int) -> User:
                self.logger.info("Fetching user", extra={"user_id": user_id})
                ...
    """

    def __init__(self) -> None:
        class_name = self.__class__.__name__
        self.logger = logging.getLogger(class_name)
        self._lazy = get_lazy_logger(class_name)
