"""Conversation analysis: normalizer, classifiers, extractors, maturity gate."""

from .text import normalize, split_sentences, count_words
from .classifiers import (
    classify,
    classify_by_count,
    detect_industry,
    detect_target_audience,
    detect_business_model,
    extract_unique_value
)
from .extractors import (
    extract_problem,
    extract_solution,
    extract_keywords,
    extract_pain_points,
    extract_sentences_with_keywords
)
from .maturity import assess_maturity
from .analyzer import (
    EmptyConversationError,
    analyze_conversation,
    generate_summary,
    calculate_opportunity_score
)

__all__ = [
    "normalize",
    "split_sentences",
    "count_words",
    "classify",
    "classify_by_count",
    "detect_industry",
    "detect_target_audience",
    "detect_business_model",
    "extract_unique_value",
    "extract_problem",
    "extract_solution",
    "extract_keywords",
    "extract_pain_points",
    "extract_sentences_with_keywords",
    "assess_maturity",
    "EmptyConversationError",
    "analyze_conversation",
    "generate_summary",
    "calculate_opportunity_score",
]
