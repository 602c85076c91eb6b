"""Data access layer - Database models, connections and repositories."""

from .db_models import Base, Design
from .database import DatabaseManager
from .repositories import DesignRepository
from .schemas import ElementSchema, DesignRecord

__all__ = [
    # Models
    'Base',
    'Design',

    # Database
    'DatabaseManager',

    # Repositories
    'DesignRepository',

    # Schemas
    'ElementSchema',
    'DesignRecord',
]
