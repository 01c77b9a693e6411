"""Database layer: models, connection management and the persistence adapter."""

from .models import Base, Config, RewriteHistory, User
from .session import DatabaseManager
from .storage import DatabaseStorage, StorageInterface

__all__ = [
    "Base",
    "User",
    "Config",
    "RewriteHistory",
    "DatabaseManager",
    "StorageInterface",
    "DatabaseStorage",
]
