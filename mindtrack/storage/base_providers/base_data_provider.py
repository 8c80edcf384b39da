"""
MindTrack base data provider
Shared plumbing for the server-side providers
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from mindtrack.utils import get_logger, to_db_time

logger = get_logger(__name__)


class BaseDataProvider:
    """
    Base data provider

    - Falls back to the global DatabaseManager when none is injected
    - Offers small SQL helpers returning plain dicts
    """

    def __init__(self, db_manager=None):
        """
        Args:
            db_manager: DatabaseManager instance, None uses the global one
        """
        self._db = db_manager

    @property
    def db(self):
        if self._db is not None:
            return self._db
        from mindtrack.storage import get_db_manager
        return get_db_manager()

    # ==================== Helpers ====================

    @staticmethod
    def new_id() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def now() -> str:
        """Current local time in the storage format"""
        return to_db_time(datetime.now())

    def _fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(sql, tuple(params))
            columns = [description[0] for description in cursor.description]
            rows = cursor.fetchall()
        return [dict(zip(columns, row)) for row in rows]

    def _fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(sql, tuple(params))
            row = cursor.fetchone()
            if row is None:
                return None
            columns = [description[0] for description in cursor.description]
        return dict(zip(columns, row))
