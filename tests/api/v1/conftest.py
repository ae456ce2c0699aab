"""Pytest fixtures for API testing."""

import random
import pytest
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI

from tiny_ceo.api.v1 import conversations, agents
from tiny_ceo.db import DatabaseConnection
from tiny_ceo.services import ReplyGenerator


@pytest.fixture(scope="function")
async def client():
    """Create async HTTP client with a fresh in-memory database for each test."""
    db_conn = DatabaseConnection()

    # Inject dependencies into routers
    conversations.db_conn = db_conn
    conversations.reply_generator = ReplyGenerator(random.Random(0))

    # Create a test app without lifespan (to avoid conflicts)
    test_app = FastAPI(title="Tiny CEO Test")
    test_app.include_router(conversations.router)
    test_app.include_router(agents.router)

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Cleanup
    conversations.db_conn = None
    conversations.reply_generator = None
    db_conn.close()


@pytest.fixture
def send(client: AsyncClient):
    """Post a chat message to a workspace conversation."""
    async def _send(workspace_id: str, message: str):
        return await client.post(
            f"/api/v1/workspaces/{workspace_id}/conversation",
            json={"message": message}
        )
    return _send
