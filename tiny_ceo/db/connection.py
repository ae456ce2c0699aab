"""Database connection and schema management."""

import duckdb
from typing import Optional
from pathlib import Path
from ..utils.logger import get_app_logger

IN_MEMORY = ":memory:"


class DatabaseConnection:
    """DuckDB connection manager."""

    def __init__(self, db_path: str = IN_MEMORY):
        """
        Initialize database connection.

        Args:
            db_path: Path to DuckDB database file, or ':memory:'
        """
        self.db_path = db_path
        self.logger = get_app_logger()
        self.conn: Optional[duckdb.DuckDBPyConnection] = None

        # Ensure database directory exists
        if db_path != IN_MEMORY:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        self._connect()
        self._init_schema()

    def _connect(self):
        """Connect to DuckDB database."""
        try:
            self.conn = duckdb.connect(self.db_path)
            self.logger.info(f"Connected to DuckDB at {self.db_path}")
        except Exception as e:
            self.logger.error(f"Failed to connect to DuckDB: {e}")
            raise

    def _init_schema(self):
        """Initialize database schema."""
        try:
            # One conversation per workspace
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS conversations (
                    id VARCHAR PRIMARY KEY,
                    workspace_id VARCHAR NOT NULL UNIQUE,
                    created_at TIMESTAMP NOT NULL
                )
            """)

            # Messages are append-only
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS messages (
                    id BIGINT PRIMARY KEY,
                    conversation_id VARCHAR NOT NULL,
                    role VARCHAR NOT NULL,
                    content VARCHAR NOT NULL,
                    timestamp TIMESTAMP NOT NULL
                )
            """)

            self.conn.execute("CREATE INDEX IF NOT EXISTS idx_messages_conversation ON messages(conversation_id)")

            # Message IDs double as the append order
            self.conn.execute("CREATE SEQUENCE IF NOT EXISTS messages_id_seq START 1")

            self.logger.info("Database schema initialized successfully")

        except Exception as e:
            self.logger.error(f"Failed to initialize database schema: {e}")
            raise

    def close(self):
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.logger.info("Database connection closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
