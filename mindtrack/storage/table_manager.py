"""
MindTrack table manager
Creates tables and indexes from the declarative configs
"""
import sqlite3

from mindtrack.config.database import TABLE_CONFIGS, TABLES_WITH_UPDATED_AT
from mindtrack.utils import get_logger

logger = get_logger(__name__)

# SQLite expression yielding "YYYY-MM-DD HH:MM:SS" in local time
LOCAL_NOW_SQL = "(datetime('now', 'localtime'))"


class TableManager:
    """
    Schema manager

    Responsible for database initialization
    """

    def __init__(self, db_manager=None):
        """
        Args:
            db_manager: DatabaseManager instance, None uses the global one
        """
        if db_manager is None:
            # deferred import, avoids a cycle with mindtrack.storage
            from mindtrack.storage import get_db_manager
            self.db = get_db_manager()
        else:
            self.db = db_manager

    def init_database(self):
        """Create every configured table"""
        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()

                for config in TABLE_CONFIGS.values():
                    self._create_table_from_config(cursor, config)

                logger.info(f"Database initialized, {len(TABLE_CONFIGS)} tables")

        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise

    def _create_table_from_config(self, cursor: sqlite3.Cursor, config: dict):
        """
        Build CREATE TABLE / CREATE INDEX statements from one table config

        Args:
            cursor: database cursor
            config: table configuration dict
        """
        table_name = config['table_name']
        columns = config['columns']
        table_constraints = config.get('table_constraints', [])
        indexes = config.get('indexes', [])
        timestamps = config.get('timestamps', False)

        # 1. column definitions
        column_definitions = []
        for col_name, col_config in columns.items():
            col_def = f"{col_name} {col_config['type']}"
            col_constraints = col_config.get('constraints', [])
            if col_constraints:
                col_def += " " + " ".join(col_constraints)
            column_definitions.append(col_def)

        # 2. timestamp columns, naive local time like every other time column
        if timestamps:
            column_definitions.append(
                f"created_at TEXT DEFAULT {LOCAL_NOW_SQL}"
            )
            if table_name in TABLES_WITH_UPDATED_AT:
                column_definitions.append(
                    f"updated_at TEXT DEFAULT {LOCAL_NOW_SQL}"
                )

        # 3. table constraints go last
        all_constraints = column_definitions + table_constraints

        create_table_sql = f"""
        CREATE TABLE IF NOT EXISTS {table_name} (
            {', '.join(all_constraints)}
        );
        """

        cursor.execute(create_table_sql)
        logger.debug(f"Table '{table_name}' ready")

        # 4. indexes
        for index in indexes:
            index_columns = ', '.join(index['columns'])
            cursor.execute(f"""
            CREATE INDEX IF NOT EXISTS {index['name']}
            ON {table_name}({index_columns});
            """)

# ==================== Convenience functions ====================

def init_database(db_manager=None):
    """
    Create all tables

    Called from the application lifespan on startup
    """
    TableManager(db_manager).init_database()
