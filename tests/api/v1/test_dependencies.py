"""Tests for router dependency providers and storage failures."""

import pytest
from unittest.mock import MagicMock
from fastapi import HTTPException
from httpx import AsyncClient

from tiny_ceo.api.v1 import conversations
from tiny_ceo.db import MessageRepository


class TestProviders:
    """SUT: conversations dependency providers"""

    def test_repo_without_database(self, monkeypatch):
        """Repositories cannot be built before the database is injected."""
        monkeypatch.setattr(conversations, "db_conn", None)
        with pytest.raises(HTTPException) as exc:
            conversations.get_conversation_repo()
        assert exc.value.status_code == 500

        with pytest.raises(HTTPException):
            conversations.get_message_repo()

    def test_reply_generator_without_injection(self, monkeypatch):
        """The reply generator must be injected first."""
        monkeypatch.setattr(conversations, "reply_generator", None)
        with pytest.raises(HTTPException) as exc:
            conversations.get_reply_generator()
        assert exc.value.detail == "Reply generator not initialized"

    def test_repo_uses_injected_connection(self, monkeypatch):
        """Repositories share the injected DuckDB connection."""
        db_conn = MagicMock()
        monkeypatch.setattr(conversations, "db_conn", db_conn)
        assert conversations.get_message_repo().conn is db_conn.conn


class TestStorageFailures:
    """Storage errors surface as 500 responses."""

    async def test_failed_pair_write(self, client: AsyncClient, send, monkeypatch):
        """If the message pair cannot be stored the request fails."""
        monkeypatch.setattr(MessageRepository, "add_pair", MagicMock(return_value=False))
        response = await send("ws1", "hello")
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to store messages"

    async def test_failed_conversation_create(self, client: AsyncClient, send, monkeypatch):
        """If the conversation cannot be created the request fails."""
        monkeypatch.setattr(conversations.ConversationRepository, "get_or_create", MagicMock(return_value=None))
        response = await send("ws1", "hello")
        assert response.status_code == 500
