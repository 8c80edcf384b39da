"""
Activity record data provider
Record CRUD and the record store consumed by the analytics engine
"""
import sqlite3
from datetime import datetime
from typing import Optional, List, Dict, Any

from mindtrack.storage import BaseDataProvider
from mindtrack.server.exceptions import RecordRetrievalError
from mindtrack.utils import get_logger, to_db_time, from_db_time

logger = get_logger(__name__)

_RECORD_WITH_TYPE_SQL = """
SELECT ar.id, ar.user_id, ar.activity_type_id, ar.start_time, ar.end_time,
       ar.note, ar.recorded_at,
       at.name AS activity_type_name,
       at.icon AS activity_type_icon,
       at.color AS activity_type_color,
       at.is_default AS activity_type_is_default,
       at.user_id AS activity_type_user_id
FROM activity_record ar
JOIN activity_type at ON ar.activity_type_id = at.id
"""


class ActivityRecordProvider(BaseDataProvider):
    """
    Activity record provider

    Timestamps come back as naive local datetimes
    """

    def __init__(self, db_manager=None):
        super().__init__(db_manager)

    @staticmethod
    def _parse_times(row: Dict[str, Any]) -> Dict[str, Any]:
        for key in ('start_time', 'end_time', 'recorded_at'):
            if key in row:
                row[key] = from_db_time(row[key])
        return row

    # ==================== Record store (analytics) ====================

    def find_records(
        self,
        user_id: str,
        start_time: datetime,
        end_time: datetime
    ) -> List[Dict[str, Any]]:
        """
        Records of a user whose start_time lies in [start_time, end_time]

        Args:
            user_id: user id
            start_time: inclusive lower bound
            end_time: inclusive upper bound

        Returns:
            List[Dict]: id, activity_type_id, activity_type_name,
                activity_type_color, start_time, end_time

        Raises:
            RecordRetrievalError: the database could not be queried
        """
        sql = """
        SELECT ar.id, ar.activity_type_id, ar.start_time, ar.end_time,
               at.name AS activity_type_name,
               at.color AS activity_type_color
        FROM activity_record ar
        JOIN activity_type at ON ar.activity_type_id = at.id
        WHERE ar.user_id = ? AND ar.start_time >= ? AND ar.start_time <= ?
        """
        params = [user_id, to_db_time(start_time), to_db_time(end_time)]
        try:
            rows = self._fetch_all(sql, params)
        except sqlite3.Error as e:
            logger.error(f"Failed to load activity records for user {user_id}: {e}")
            raise RecordRetrievalError("활동 기록을 불러오지 못했습니다.") from e

        return [self._parse_times(row) for row in rows]

    # ==================== CRUD ====================

    def list_records(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        activity_type_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Records of a user with their activity type, newest first

        The date filter only applies when both bounds are given.

        Raises:
            RecordRetrievalError: the database could not be queried
        """
        where_conditions = ["ar.user_id = ?"]
        params: List[Any] = [user_id]

        if start_date and end_date:
            where_conditions.append("ar.start_time BETWEEN ? AND ?")
            params.extend([to_db_time(start_date), to_db_time(end_date)])

        if activity_type_id:
            where_conditions.append("ar.activity_type_id = ?")
            params.append(activity_type_id)

        sql = (
            _RECORD_WITH_TYPE_SQL
            + " WHERE " + " AND ".join(where_conditions)
            + " ORDER BY ar.start_time DESC"
        )
        try:
            rows = self._fetch_all(sql, params)
        except sqlite3.Error as e:
            logger.error(f"Failed to list activity records for user {user_id}: {e}")
            raise RecordRetrievalError("활동 기록을 불러오지 못했습니다.") from e

        return [self._parse_times(row) for row in rows]

    def get_record(self, record_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        row = self._fetch_one(
            _RECORD_WITH_TYPE_SQL + " WHERE ar.id = ? AND ar.user_id = ?",
            [record_id, user_id]
        )
        return self._parse_times(row) if row else None

    def create(self, user_id: str, data: Dict[str, Any]) -> str:
        """
        Insert a record

        Args:
            user_id: owner id
            data: activity_type_id, start_time, end_time (datetime), note

        Returns:
            str: the new id
        """
        new_id = self.new_id()
        self.db.insert('activity_record', {
            'id': new_id,
            'user_id': user_id,
            'activity_type_id': data['activity_type_id'],
            'start_time': to_db_time(data['start_time']),
            'end_time': to_db_time(data['end_time']),
            'note': data.get('note'),
            'recorded_at': self.now(),
        })
        return new_id

    def delete(self, record_id: str, user_id: str) -> int:
        return self.db.delete('activity_record', where={'id': record_id, 'user_id': user_id})
