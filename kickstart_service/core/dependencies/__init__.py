"""FastAPI dependencies shared across features."""

from .database import SessionDep, get_db_session

__all__ = ["SessionDep", "get_db_session"]
