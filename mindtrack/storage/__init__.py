"""
Storage module
"""
import threading
from typing import Optional

from .database_manager import DatabaseManager
from mindtrack.config import settings

# ==================== Global database manager ====================

_db_manager: Optional[DatabaseManager] = None
_db_lock = threading.Lock()


def get_db_manager() -> DatabaseManager:
    """Return the global DatabaseManager, created from settings on first use"""
    global _db_manager
    if _db_manager is None:
        with _db_lock:
            if _db_manager is None:
                _db_manager = DatabaseManager(
                    DB_PATH=settings.db_path,
                    use_pool=True,
                    pool_size=5
                )
    return _db_manager


def set_db_manager(manager: DatabaseManager) -> None:
    """Replace the global DatabaseManager (other database file, tests)"""
    global _db_manager
    with _db_lock:
        _db_manager = manager


# ==================== Base data provider ====================
from .base_providers import BaseDataProvider
from .table_manager import TableManager, init_database

__all__ = [
    "DatabaseManager",
    "get_db_manager",
    "set_db_manager",
    "BaseDataProvider",
    "TableManager",
    "init_database",
]
