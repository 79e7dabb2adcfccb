from src.configuration.config import Base

from .base_repository import (
    BaseRepository,
    ModelType,
)
from .database import (
    Database,
    get_db,
)

__all__ = [
    "Base",
    "get_db",
    "Database",
    "BaseRepository",
    "ModelType",
]
