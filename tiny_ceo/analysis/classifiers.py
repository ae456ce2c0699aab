"""Keyword classifiers.

Two matching disciplines are used: industry is scored by keyword count,
every other field is first-match-wins. Matching is plain substring search
on lower-cased text, so short keywords such as "ai" also hit inside longer
words ("said", "email").
"""

from typing import Dict, Iterable, Tuple

from .tables import (
    BUSINESS_MODEL_RULES,
    DEFAULT_BUSINESS_MODEL,
    DEFAULT_INDUSTRY,
    DEFAULT_TARGET_AUDIENCE,
    DEFAULT_UNIQUE_VALUE,
    INDUSTRY_KEYWORDS,
    TARGET_AUDIENCE_KEYWORDS,
    UNIQUE_VALUE_KEYWORDS,
)
from .text import normalize


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Return True if any keyword occurs as a substring of text."""
    return any(keyword in text for keyword in keywords)


def classify(text: str, table: Dict[str, Tuple[str, ...]], default: str) -> str:
    """
    First-match-wins classification.

    Args:
        text: Free text (normalized here)
        table: Ordered mapping of label to trigger keywords
        default: Label returned when nothing matches

    Returns:
        Label of the first entry with a keyword present in text
    """
    lowered = normalize(text)
    for label, keywords in table.items():
        if contains_any(lowered, keywords):
            return label
    return default


def classify_by_count(text: str, table: Dict[str, Tuple[str, ...]], default: str) -> str:
    """
    Highest-count classification.

    Each label scores the number of its keywords present in text. The
    strictly highest score wins, so the earlier label keeps a tie. An
    all-zero score returns default.

    Args:
        text: Free text (normalized here)
        table: Ordered mapping of label to trigger keywords
        default: Label returned when nothing matches

    Returns:
        Best-scoring label
    """
    lowered = normalize(text)
    best_label = default
    best_score = 0
    for label, keywords in table.items():
        score = sum(1 for keyword in keywords if keyword in lowered)
        if score > best_score:
            best_score = score
            best_label = label
    return best_label


def detect_industry(text: str) -> str:
    """Detect the industry by keyword count, defaulting to 'saas'."""
    return classify_by_count(text, INDUSTRY_KEYWORDS, DEFAULT_INDUSTRY)


def detect_target_audience(text: str) -> str:
    """Detect the target audience, first table entry wins."""
    return classify(text, TARGET_AUDIENCE_KEYWORDS, DEFAULT_TARGET_AUDIENCE)


def detect_business_model(text: str) -> str:
    """
    Detect the business model.

    Rules are tried in order; a rule matches when each of its keyword
    groups has at least one hit ("free" and "premium" for Freemium).
    """
    lowered = normalize(text)
    for label, groups in BUSINESS_MODEL_RULES:
        if all(contains_any(lowered, group) for group in groups):
            return label
    return DEFAULT_BUSINESS_MODEL


def extract_unique_value(text: str) -> str:
    """Pick the unique value proposition, first table entry wins."""
    return classify(text, UNIQUE_VALUE_KEYWORDS, DEFAULT_UNIQUE_VALUE)
