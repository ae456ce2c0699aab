"""Shared pytest fixtures."""

import pytest

from tiny_ceo.models.conversation import ConversationMessage


@pytest.fixture
def scenario_a_messages():
    """A single founder message describing an invoicing SaaS."""
    return [ConversationMessage(
        role="user",
        content=(
            "I'm building a tool for small business owners to track invoices, "
            "it's a subscription SaaS product"
        )
    )]
