"""Tests for ConversationRepository."""

import pytest
from datetime import datetime

from tiny_ceo.db.connection import DatabaseConnection
from tiny_ceo.db.repositories.conversation import ConversationRepository
from tiny_ceo.db.database_models.conversation import ConversationDO


@pytest.fixture
def db_conn():
    """Provide a fresh in-memory database connection."""
    db = DatabaseConnection()
    yield db
    db.close()


@pytest.fixture
def repo(db_conn):
    """Provide a ConversationRepository."""
    return ConversationRepository(db_conn.conn)


def _make_conv(**overrides):
    """Factory for ConversationDO with sensible defaults."""
    defaults = dict(id="c1", workspace_id="ws1")
    defaults.update(overrides)
    return ConversationDO(**defaults)


def _count(db_conn):
    return db_conn.conn.execute("SELECT COUNT(*) FROM conversations").fetchone()[0]


class TestConversationRepository:
    """Tests for ConversationRepository."""

    class TestCreate:
        """SUT: ConversationRepository.create"""

        def test_returns_true(self, repo):
            """create() should return True on success."""
            assert repo.create(_make_conv()) is True

        def test_fields_persisted(self, repo):
            """Created conversation should be retrievable with all fields."""
            created_at = datetime(2024, 1, 2, 3, 4, 5)
            repo.create(_make_conv(created_at=created_at))
            result = repo.get_by_workspace("ws1")
            assert result is not None
            assert result.id == "c1"
            assert result.created_at == created_at

        def test_duplicate_workspace_returns_false(self, repo, db_conn):
            """A second conversation for the same workspace is rejected."""
            repo.create(_make_conv())
            assert repo.create(_make_conv(id="c2")) is False
            assert _count(db_conn) == 1

    class TestGetByWorkspace:
        """SUT: ConversationRepository.get_by_workspace"""

        def test_found(self, repo):
            """Should find the workspace conversation."""
            repo.create(_make_conv())
            assert repo.get_by_workspace("ws1").id == "c1"

        def test_not_found(self, repo):
            """Should return None for a workspace without a conversation."""
            assert repo.get_by_workspace("ws-unknown") is None

    class TestGetOrCreate:
        """SUT: ConversationRepository.get_or_create"""

        def test_creates_on_first_use(self, repo):
            """A new workspace gets a fresh, stored conversation."""
            conversation = repo.get_or_create("ws1")
            assert conversation is not None
            assert conversation.workspace_id == "ws1"
            assert repo.get_by_workspace("ws1").id == conversation.id

        def test_returns_existing(self, repo, db_conn):
            """Repeated calls return the same conversation."""
            first = repo.get_or_create("ws1")
            second = repo.get_or_create("ws1")
            assert first.id == second.id
            assert _count(db_conn) == 1

        def test_workspaces_are_isolated(self, repo):
            """Different workspaces get different conversations."""
            assert repo.get_or_create("ws1").id != repo.get_or_create("ws2").id
