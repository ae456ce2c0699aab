"""Base repository class."""

import duckdb
from typing import Any, List, Optional, Sequence, Tuple
from ...utils.logger import get_app_logger


class BaseRepository:
    """Base class for all repositories."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        """
        Initialize repository with database connection.

        Args:
            conn: DuckDB connection instance
        """
        self.conn = conn
        self.logger = get_app_logger()

    def _fetch_one(self, sql: str, params: Sequence[Any], action: str) -> Optional[Tuple]:
        """Run a query and return its first row, logging failures as `action`."""
        try:
            return self.conn.execute(sql, list(params)).fetchone()
        except Exception as e:
            self.logger.error(f"Failed to {action}: {e}")
            return None

    def _fetch_all(self, sql: str, params: Sequence[Any], action: str) -> List[Tuple]:
        """Run a query and return all rows, logging failures as `action`."""
        try:
            return self.conn.execute(sql, list(params)).fetchall()
        except Exception as e:
            self.logger.error(f"Failed to {action}: {e}")
            return []
