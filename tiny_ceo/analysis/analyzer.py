"""Conversation analysis aggregator.

Combines the extractors and classifiers into a single ConversationAnalysis.
Every field is computed independently from the same combined user text.
"""

from typing import Sequence

from ..models.analysis import AnalysisMetadata, ConversationAnalysis, ConversationSummary
from ..models.conversation import ConversationMessage
from ..utils.logger import get_logger
from .classifiers import (
    detect_business_model,
    detect_industry,
    detect_target_audience,
    extract_unique_value,
)
from .extractors import extract_keywords, extract_problem, extract_solution
from .text import count_words

logger = get_logger("analysis")

GROWTH_INDUSTRIES = ("ai", "fintech", "healthcare", "saas")
BASE_OPPORTUNITY_SCORE = 50
MAX_OPPORTUNITY_SCORE = 100


class EmptyConversationError(ValueError):
    """Raised when a conversation has no user-authored content to analyze."""

    def __init__(self, message: str = "No user messages found in conversation"):
        super().__init__(message)


def combine_user_text(messages: Sequence[ConversationMessage]) -> str:
    """Join user message contents with blank lines."""
    return "\n\n".join(m.content for m in messages if m.role == "user")


def analyze_conversation(messages: Sequence[ConversationMessage]) -> ConversationAnalysis:
    """
    Extract structured startup information from a conversation.

    Args:
        messages: Conversation messages, oldest first

    Returns:
        ConversationAnalysis with every field populated

    Raises:
        EmptyConversationError: If there is no non-blank user content
    """
    logger.info(f"Analyzing conversation ({len(messages)} messages)")

    full_text = combine_user_text(messages)
    if not full_text.strip():
        raise EmptyConversationError()

    analysis = ConversationAnalysis(
        full_text=full_text,
        problem=extract_problem(full_text),
        solution=extract_solution(full_text),
        target_audience=detect_target_audience(full_text),
        industry=detect_industry(full_text),
        business_model=detect_business_model(full_text),
        unique_value=extract_unique_value(full_text),
        keywords=extract_keywords(full_text),
        metadata=AnalysisMetadata(
            message_count=len(messages),
            word_count=count_words(full_text),
        ),
    )

    logger.info(
        f"Conversation analyzed: industry={analysis.industry}, "
        f"target_audience={analysis.target_audience}, "
        f"business_model={analysis.business_model}"
    )
    return analysis


def generate_summary(analysis: ConversationAnalysis) -> ConversationSummary:
    """Build the short summary every advisor report starts from."""
    return ConversationSummary(
        one_line_summary=(
            f"A {analysis.industry} solution for {analysis.target_audience} "
            f"that {analysis.solution.lower()}"
        ),
        problem_statement=analysis.problem,
        proposed_solution=analysis.solution,
        target_market=analysis.target_audience,
        business_model=analysis.business_model,
        key_differentiator=analysis.unique_value,
    )


def calculate_opportunity_score(analysis: ConversationAnalysis) -> int:
    """
    Heuristic opportunity score between 0 and 100.

    The business model checks are case-sensitive, so the capitalized
    labels produced by detect_business_model never earn those points.
    """
    score = BASE_OPPORTUNITY_SCORE

    if analysis.industry.lower() in GROWTH_INDUSTRIES:
        score += 10

    if len(analysis.problem) > 30:
        score += 5
    if len(analysis.solution) > 30:
        score += 5
    if len(analysis.target_audience) > 10:
        score += 5

    if len(analysis.keywords) >= 5:
        score += 5

    if "subscription" in analysis.business_model:
        score += 10
    if "marketplace" in analysis.business_model:
        score += 8

    return min(score, MAX_OPPORTUNITY_SCORE)
