"""
Activity type data provider
Shared (default) types and user-owned types live in one table
"""
from typing import Optional, List, Dict, Any, Tuple

from mindtrack.storage import BaseDataProvider
from mindtrack.utils import get_logger

logger = get_logger(__name__)


def visible_to_user(user_id: str, alias: str = "at") -> Tuple[str, List[Any]]:
    """
    The single visibility rule for activity types

    A type is visible to a user when it is shared with everyone
    (is_default = 1) or owned by that user.

    Returns:
        (SQL condition, params)
    """
    return f"({alias}.is_default = 1 OR {alias}.user_id = ?)", [user_id]


class ActivityTypeProvider(BaseDataProvider):
    """
    Activity type provider

    CRUD on the activity_type table plus seeding of the shared defaults
    """

    def __init__(self, db_manager=None):
        super().__init__(db_manager)

    # ==================== Queries ====================

    def list_visible(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Every type the user can see, oldest first

        Args:
            user_id: user id

        Returns:
            List[Dict]: activity_type rows
        """
        condition, params = visible_to_user(user_id)
        sql = f"""
        SELECT at.* FROM activity_type at
        WHERE {condition}
        ORDER BY at.created_at ASC, at.rowid ASC
        """
        return self._fetch_all(sql, params)

    def get_visible(self, type_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        """
        One type by id, None when it does not exist or belongs to someone else
        """
        condition, params = visible_to_user(user_id)
        sql = f"SELECT at.* FROM activity_type at WHERE at.id = ? AND {condition}"
        return self._fetch_one(sql, [type_id] + params)

    def get_by_id(self, type_id: str) -> Optional[Dict[str, Any]]:
        return self.db.get_by_id('activity_type', 'id', type_id)

    def has_records(self, type_id: str) -> bool:
        row = self._fetch_one(
            "SELECT 1 FROM activity_record WHERE activity_type_id = ? LIMIT 1",
            [type_id]
        )
        return row is not None

    # ==================== Mutations ====================

    def create(self, user_id: str, data: Dict[str, Any]) -> str:
        """
        Create a user-owned type

        Args:
            user_id: owner id
            data: name, icon, color

        Returns:
            str: the new id
        """
        new_id = self.new_id()
        self.db.insert('activity_type', {
            'id': new_id,
            'name': data['name'],
            'icon': data.get('icon'),
            'color': data.get('color'),
            'is_default': 0,
            'user_id': user_id,
        })
        logger.info(f"Activity type {new_id} created for user {user_id}")
        return new_id

    def update(self, type_id: str, data: Dict[str, Any]) -> int:
        if not data:
            return 0
        data = dict(data)
        data['updated_at'] = self.now()
        return self.db.update('activity_type', data, where={'id': type_id})

    def delete(self, type_id: str) -> int:
        return self.db.delete('activity_type', where={'id': type_id})

    def seed_defaults(self, default_types: List[Dict[str, Any]]) -> int:
        """
        Insert the shared types whose name is not present yet

        Args:
            default_types: [{'name', 'icon', 'color'}, ...]

        Returns:
            int: number of inserted types
        """
        existing_df = self.db.query('activity_type', columns=['name'], where={'is_default': 1})
        existing = set(existing_df['name']) if not existing_df.empty else set()

        inserted = 0
        for type_def in default_types:
            if type_def['name'] in existing:
                continue
            self.db.insert('activity_type', {
                'id': self.new_id(),
                'name': type_def['name'],
                'icon': type_def.get('icon'),
                'color': type_def.get('color'),
                'is_default': 1,
                'user_id': None,
            })
            inserted += 1

        if inserted:
            logger.info(f"Seeded {inserted} default activity types")
        return inserted
