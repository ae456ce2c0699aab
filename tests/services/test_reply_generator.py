"""Tests for the template reply generator."""

import random

from tiny_ceo.models.conversation import ConversationMessage
from tiny_ceo.services.reply_generator import (
    COMPETITION_REPLY,
    CONTEXTUAL_REPLIES,
    CUSTOMERS_REPLY,
    MONETIZATION_REPLY,
    PROBLEM_REPLY,
    READY_REPLY,
    WELCOME_REPLY,
    ConversationContext,
    ReplyGenerator,
)


class FirstChoice:
    """Deterministic stand-in for random.Random."""

    def choice(self, seq):
        return seq[0]


class TestConversationContext:
    """SUT: ConversationContext.from_messages"""

    def test_empty(self):
        """An empty history has no topics and no user messages."""
        assert ConversationContext.from_messages([]) == ConversationContext()

    def test_counts_user_messages_only(self):
        """message_count ignores assistant replies."""
        context = ConversationContext.from_messages([
            ConversationMessage(role="user", content="hello"),
            ConversationMessage(role="assistant", content="hi"),
            ConversationMessage(role="user", content="again"),
        ])
        assert context.message_count == 2

    def test_topics_include_assistant_text(self):
        """Topic flags look at assistant messages too."""
        context = ConversationContext.from_messages([
            ConversationMessage(role="user", content="hello"),
            ConversationMessage(role="assistant", content=WELCOME_REPLY),
        ])
        assert context.has_problem is True
        assert context.has_customers is False

    def test_topic_keywords(self):
        """Each flag is triggered by its keywords, case-insensitively."""
        context = ConversationContext.from_messages([
            ConversationMessage(role="user", content="Our TARGET pays a Price; one Competitor exists"),
        ])
        assert context.has_problem is False
        assert context.has_customers is True
        assert context.has_monetization is True
        assert context.has_competition is True


class TestReplyGenerator:
    """SUT: ReplyGenerator.generate"""

    def setup_method(self):
        self.generator = ReplyGenerator(FirstChoice())

    def test_welcome(self):
        """The first user message gets the welcome reply."""
        assert self.generator.generate(ConversationContext()) == WELCOME_REPLY

    def test_stage_replies(self):
        """Each stage asks about the first topic not yet covered."""
        assert self.generator.generate(ConversationContext(message_count=1)) == PROBLEM_REPLY
        assert self.generator.generate(ConversationContext(message_count=2)) == CUSTOMERS_REPLY
        assert self.generator.generate(ConversationContext(message_count=3)) == MONETIZATION_REPLY
        assert self.generator.generate(ConversationContext(message_count=4)) == COMPETITION_REPLY

    def test_ready(self):
        """Five or more prior user messages get the ready reply."""
        assert self.generator.generate(ConversationContext(message_count=5)) == READY_REPLY
        assert self.generator.generate(ConversationContext(message_count=9, has_problem=True)) == READY_REPLY

    def test_covered_topic_gets_contextual_reply(self):
        """A stage whose topic is already covered falls back to the random source."""
        context = ConversationContext(message_count=1, has_problem=True)
        assert self.generator.generate(context) == CONTEXTUAL_REPLIES[0]

    def test_second_message_after_welcome(self):
        """The welcome reply mentions 'problem', so the second message gets a contextual reply."""
        context = ConversationContext.from_messages([
            ConversationMessage(role="user", content="hello"),
            ConversationMessage(role="assistant", content=WELCOME_REPLY),
        ])
        assert self.generator.generate(context) == CONTEXTUAL_REPLIES[0]

    def test_seeded_random_is_reproducible(self):
        """Two generators with the same seed choose the same replies."""
        context = ConversationContext(message_count=2, has_customers=True)
        first = ReplyGenerator(random.Random(42))
        second = ReplyGenerator(random.Random(42))
        replies = [first.generate(context) for _ in range(5)]
        assert replies == [second.generate(context) for _ in range(5)]
        assert all(r in CONTEXTUAL_REPLIES for r in replies)

    def test_default_random_source(self):
        """Without an injected source a fresh Random is used."""
        assert isinstance(ReplyGenerator().rng, random.Random)
