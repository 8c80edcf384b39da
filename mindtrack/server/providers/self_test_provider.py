"""
Self-test data provider
"""
import json
from typing import Optional, List, Dict, Any

from mindtrack.storage import BaseDataProvider
from mindtrack.utils import get_logger, from_db_time

logger = get_logger(__name__)


class SelfTestProvider(BaseDataProvider):
    """Reads and writes the self_test table"""

    def __init__(self, db_manager=None):
        super().__init__(db_manager)

    @staticmethod
    def _decode(row: Dict[str, Any]) -> Dict[str, Any]:
        row['answers'] = json.loads(row['answers']) if row.get('answers') else {}
        row['taken_at'] = from_db_time(row['taken_at'])
        row['is_completed'] = bool(row.get('is_completed'))
        return row

    def get_latest(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Most recent test of the user, None if there is none"""
        row = self._fetch_one(
            "SELECT * FROM self_test WHERE user_id = ? ORDER BY taken_at DESC, rowid DESC LIMIT 1",
            [user_id]
        )
        return self._decode(row) if row else None

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        rows = self._fetch_all(
            "SELECT * FROM self_test WHERE user_id = ? ORDER BY taken_at DESC, rowid DESC",
            [user_id]
        )
        return [self._decode(row) for row in rows]

    def get_by_id(self, test_id: str) -> Optional[Dict[str, Any]]:
        row = self._fetch_one("SELECT * FROM self_test WHERE id = ?", [test_id])
        return self._decode(row) if row else None

    def create(self, user_id: str, score: int, answers: Dict[str, Any], feedback: str,
               taken_at: Optional[str] = None) -> str:
        """
        Store a finished test

        Returns:
            str: the new id
        """
        new_id = self.new_id()
        self.db.insert('self_test', {
            'id': new_id,
            'user_id': user_id,
            'score': score,
            'answers': json.dumps(answers, ensure_ascii=False),
            'feedback': feedback,
            'taken_at': taken_at or self.now(),
            'is_completed': 1,
        })
        logger.info(f"Self-test {new_id} stored for user {user_id} (score {score})")
        return new_id
