"""Conversation maturity assessment."""

from typing import Dict, Sequence

from ..models.analysis import MaturityAssessment
from ..models.conversation import ConversationMessage
from .tables import TOPIC_PATTERNS
from .text import count_words, normalize

MIN_USER_MESSAGES = 2
MIN_WORD_COUNT = 30
MIN_READY_SCORE = 3

READY_RECOMMENDATION = "Conversation is ready for agent analysis"
NOT_READY_RECOMMENDATION = "Continue conversation to gather more details about your startup idea"


def assess_maturity(messages: Sequence[ConversationMessage]) -> MaturityAssessment:
    """
    Score how much startup detail the user has shared so far.

    Readiness needs both a score of at least 3 out of 6 and at least two
    user messages; neither condition is enough on its own.

    Args:
        messages: Conversation messages, oldest first

    Returns:
        MaturityAssessment, well-formed even for an empty list
    """
    user_messages = [m for m in messages if m.role == "user"]
    full_text = normalize(" ".join(m.content for m in user_messages))

    checks: Dict[str, bool] = {
        "has_sufficient_messages": len(user_messages) >= MIN_USER_MESSAGES,
        "has_sufficient_content": count_words(full_text) >= MIN_WORD_COUNT,
    }
    for name, pattern in TOPIC_PATTERNS.items():
        checks[name] = pattern.search(full_text) is not None

    score = sum(1 for passed in checks.values() if passed)
    max_score = len(checks)
    is_ready = score >= MIN_READY_SCORE and len(user_messages) >= MIN_USER_MESSAGES

    return MaturityAssessment(
        is_ready=is_ready,
        score=score,
        max_score=max_score,
        maturity_percentage=round(score / max_score * 100),
        checks=checks,
        recommendation=READY_RECOMMENDATION if is_ready else NOT_READY_RECOMMENDATION,
    )
