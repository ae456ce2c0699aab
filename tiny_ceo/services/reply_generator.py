"""Template-based conversational replies.

Guides the founder through problem, customers, monetization and
competition before advisor generation. Replies that have no stage-specific
template are drawn from an injected random source so callers and tests
control the choice.
"""

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from ..models.conversation import ConversationMessage

WELCOME_REPLY = (
    "Welcome! I'm excited to learn about your startup idea. "
    "Tell me, what problem are you solving and who are you solving it for?"
)
PROBLEM_REPLY = (
    "That sounds interesting! Can you tell me more about the specific problem this addresses? "
    "What makes this problem worth solving?"
)
CUSTOMERS_REPLY = (
    "Great! Who is your ideal customer? Can you describe them - their industry, size, "
    "current behavior, and why they need your solution?"
)
MONETIZATION_REPLY = (
    "Excellent insights! How do you plan to make money? "
    "What pricing model are you considering and why?"
)
COMPETITION_REPLY = (
    "Interesting business model! What alternatives exist today? "
    "How will you differentiate from existing solutions?"
)
READY_REPLY = (
    "I have a solid understanding of your startup! I can now generate comprehensive insights "
    "from 6 specialized AI agents who will analyze your market, competition, financials, "
    "technology, marketing, and sales strategy. Click 'Create Startup Space' to get started!"
)
CONTEXTUAL_REPLIES = (
    "That's a valuable insight. Can you elaborate on how this would work in practice?",
    "Interesting approach! What validation have you done so far?",
    "Makes sense. What's your biggest uncertainty or concern about this?",
    "Good point. How does this fit into your overall go-to-market strategy?",
)

READY_MESSAGE_COUNT = 5


@dataclass
class ConversationContext:
    """What the conversation has covered before the incoming message."""

    message_count: int = 0
    has_problem: bool = False
    has_customers: bool = False
    has_monetization: bool = False
    has_competition: bool = False

    @classmethod
    def from_messages(cls, messages: Sequence[ConversationMessage]) -> "ConversationContext":
        """Build the context from every stored message, assistant replies included."""
        contents = [m.content.lower() for m in messages]

        def mentioned(*keywords: str) -> bool:
            return any(k in content for content in contents for k in keywords)

        return cls(
            message_count=sum(1 for m in messages if m.role == "user"),
            has_problem=mentioned("problem", "solve"),
            has_customers=mentioned("customer", "target"),
            has_monetization=mentioned("price", "revenue"),
            has_competition=mentioned("competitor"),
        )


class ReplyGenerator:
    """Produces the assistant's next chat reply."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source for contextual replies; a fresh unseeded one by default
        """
        self.rng = rng or random.Random()

    def generate(self, context: ConversationContext) -> str:
        """
        Pick the reply for the incoming user message.

        Args:
            context: State of the conversation before the incoming message

        Returns:
            Assistant reply text
        """
        count = context.message_count

        if count == 0:
            return WELCOME_REPLY
        if count == 1 and not context.has_problem:
            return PROBLEM_REPLY
        if count == 2 and not context.has_customers:
            return CUSTOMERS_REPLY
        if count == 3 and not context.has_monetization:
            return MONETIZATION_REPLY
        if count == 4 and not context.has_competition:
            return COMPETITION_REPLY
        if count >= READY_MESSAGE_COUNT:
            return READY_REPLY

        return self.rng.choice(CONTEXTUAL_REPLIES)
