"""Bank demonstration feature built on the users service."""

from .router import router
from .service import BankService, get_bank_service

__all__ = ["BankService", "get_bank_service", "router"]
