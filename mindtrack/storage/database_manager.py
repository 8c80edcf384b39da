"""
SQLite database access for MindTrack

Connection handling (per-call connections or a bounded pool) plus the
generic CRUD helpers every data provider builds on.
"""
import sqlite3
import pandas as pd
from pathlib import Path
from typing import Dict, List, Optional, Any
from contextlib import contextmanager
from queue import Queue, Empty, Full
import threading
import atexit

from mindtrack.utils import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """Database manager"""

    def __init__(self, DB_PATH: str, use_pool: bool = False, pool_size: int = 5):
        """
        Args:
            DB_PATH: SQLite file path
            use_pool: keep a pool of open connections (default False)
            pool_size: pool size (default 5)
        """
        self.DB_PATH = DB_PATH
        self.use_pool = use_pool
        self.pool_size = pool_size

        self._connection_pool = None
        self._pool_lock = threading.Lock()

        Path(self.DB_PATH).parent.mkdir(parents=True, exist_ok=True)

        if self.use_pool:
            self._init_connection_pool()
            atexit.register(self.close)

    def _init_connection_pool(self):
        logger.info(f"Initializing connection pool, size: {self.pool_size}")
        self._connection_pool = Queue(maxsize=self.pool_size)

        for _ in range(self.pool_size):
            self._connection_pool.put(self._create_connection())

    def _create_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.DB_PATH, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def _get_pooled_connection(self) -> sqlite3.Connection:
        try:
            conn = self._connection_pool.get(timeout=1.0)
            try:
                conn.execute("SELECT 1")
                return conn
            except sqlite3.Error:
                logger.warning("Stale pooled connection, opening a new one")
                return self._create_connection()
        except Empty:
            logger.warning("Connection pool exhausted, opening a temporary connection")
            return self._create_connection()

    def _return_pooled_connection(self, conn: sqlite3.Connection):
        try:
            self._connection_pool.put_nowait(conn)
        except Full:
            conn.close()

    def close(self):
        """Close every pooled connection"""
        with self._pool_lock:
            if self._connection_pool is None:
                return

            closed_count = 0
            while not self._connection_pool.empty():
                try:
                    conn = self._connection_pool.get_nowait()
                    conn.close()
                    closed_count += 1
                except Empty:
                    break

            logger.info(f"Connection pool closed, {closed_count} connections released")
            self._connection_pool = None

    @contextmanager
    def get_connection(self):
        """
        Connection context manager

        Commits when the block succeeds, rolls back and re-raises otherwise.

        Yields:
            sqlite3.Connection
        """
        pooled = self.use_pool and self._connection_pool is not None
        conn = self._get_pooled_connection() if pooled else self._create_connection()
        try:
            yield conn
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Database operation failed, rolled back: {e}")
            raise
        finally:
            if pooled:
                self._return_pooled_connection(conn)
            else:
                conn.close()

    # ==================== READ ====================

    def query(self,
              table_name: str,
              columns: List[str] = None,
              where: Dict[str, Any] = None,
              order_by: str = None,
              limit: int = None) -> pd.DataFrame:
        """
        Generic SELECT

        Args:
            table_name: table name
            columns: columns to select, None for all
            where: equality conditions, e.g. {'user_id': 'u1', 'is_default': 0}
            order_by: ORDER BY clause, e.g. 'created_at ASC'
            limit: row limit

        Returns:
            pd.DataFrame: query result (empty DataFrame when nothing matches)
        """
        select_cols = ', '.join(columns) if columns else '*'
        sql = f"SELECT {select_cols} FROM {table_name}"
        params = []

        if where:
            where_clauses = []
            for key, value in where.items():
                where_clauses.append(f"{key} = ?")
                params.append(value)
            sql += " WHERE " + " AND ".join(where_clauses)

        if order_by:
            sql += f" ORDER BY {order_by}"

        if limit:
            sql += f" LIMIT {int(limit)}"

        try:
            with self.get_connection() as conn:
                df = pd.read_sql_query(sql, conn, params=params)
                logger.debug(f"Query on {table_name} returned {len(df)} rows")
                return df
        except Exception as e:
            logger.error(f"Query failed: {e}")
            raise

    def get_by_id(self, table_name: str, id_column: str, id_value: Any) -> Optional[Dict]:
        """
        Fetch one row by id

        Returns:
            Optional[Dict]: the row (SQL NULL mapped to None), or None
        """
        df = self.query(table_name, where={id_column: id_value}, limit=1)
        if df.empty:
            return None
        df = df.astype(object).where(df.notna(), None)
        return df.iloc[0].to_dict()

    # ==================== CREATE ====================

    def insert(self, table_name: str, data: Dict[str, Any]) -> int:
        """
        Insert one row

        Returns:
            int: affected rows
        """
        columns = ', '.join(data.keys())
        placeholders = ', '.join(['?' for _ in data])
        sql = f"INSERT INTO {table_name} ({columns}) VALUES ({placeholders})"

        try:
            with self.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(sql, list(data.values()))
                logger.debug(f"Inserted into {table_name}")
                return cursor.rowcount
        except Exception as e:
            logger.error(f"Insert failed: {e}")
            raise

    # ==================== UPDATE ====================

    def update(self,
               table_name: str,
               data: Dict[str, Any],
               where: Dict[str, Any]) -> int:
        """
        Update rows matching ``where``

        Returns:
            int: affected rows
        """
        set_str = ', '.join(f"{key} = ?" for key in data.keys())
        where_str = ' AND '.join(f"{key} = ?" for key in where.keys())

        sql = f"UPDATE {table_name} SET {set_str} WHERE {where_str}"
        params = list(data.values()) + list(where.values())

        try:
            with self.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(sql, params)
                logger.debug(f"Updated {table_name}, {cursor.rowcount} rows")
                return cursor.rowcount
        except Exception as e:
            logger.error(f"Update failed: {e}")
            raise

    # ==================== DELETE ====================

    def delete(self, table_name: str, where: Dict[str, Any]) -> int:
        """
        Delete rows matching ``where``

        Returns:
            int: affected rows
        """
        where_str = ' AND '.join(f"{key} = ?" for key in where.keys())
        sql = f"DELETE FROM {table_name} WHERE {where_str}"

        try:
            with self.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(sql, list(where.values()))
                logger.info(f"Deleted from {table_name}, {cursor.rowcount} rows")
                return cursor.rowcount
        except Exception as e:
            logger.error(f"Delete failed: {e}")
            raise
