"""Tests for database connection and schema management."""

import pytest
from pathlib import Path

from tiny_ceo.db.connection import DatabaseConnection


@pytest.fixture
def db_path(tmp_path):
    """Provide a temporary database path."""
    return str(tmp_path / "nested" / "test.db")


class TestDatabaseConnection:
    """Tests for DatabaseConnection."""

    def test_in_memory_by_default(self):
        """Default connection is volatile and creates no file."""
        conn = DatabaseConnection()
        assert conn.db_path == ":memory:"
        assert conn.conn.execute("SELECT COUNT(*) FROM messages").fetchone()[0] == 0
        conn.close()

    def test_file_creates_parent_dir(self, db_path):
        """A file-backed database gets its directory created."""
        conn = DatabaseConnection(db_path)
        assert Path(db_path).exists()
        conn.close()

    def test_schema_tables(self):
        """Conversations and messages tables should be queryable after init."""
        with DatabaseConnection() as conn:
            for table in ("conversations", "messages"):
                result = conn.conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
                assert result[0] == 0

    def test_schema_index_exists(self):
        """The messages lookup index should exist."""
        with DatabaseConnection() as conn:
            result = conn.conn.execute("SELECT index_name FROM duckdb_indexes()").fetchall()
            assert "idx_messages_conversation" in [r[0] for r in result]

    def test_schema_idempotent(self, db_path):
        """Reopening an existing database keeps its data."""
        conn = DatabaseConnection(db_path)
        conn.conn.execute(
            "INSERT INTO conversations VALUES ('c1', 'ws1', CURRENT_TIMESTAMP)"
        )
        conn.close()

        conn = DatabaseConnection(db_path)
        assert conn.conn.execute("SELECT COUNT(*) FROM conversations").fetchone()[0] == 1
        conn.close()

    def test_workspace_is_unique(self):
        """A workspace can only own one conversation."""
        with DatabaseConnection() as conn:
            conn.conn.execute("INSERT INTO conversations VALUES ('c1', 'ws1', CURRENT_TIMESTAMP)")
            with pytest.raises(Exception):
                conn.conn.execute("INSERT INTO conversations VALUES ('c2', 'ws1', CURRENT_TIMESTAMP)")
