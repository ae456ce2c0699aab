"""Sentence and keyword extractors."""

import re
from collections import Counter
from typing import Iterable, List

from .classifiers import contains_any
from .tables import (
    DEFAULT_PROBLEM,
    DEFAULT_SOLUTION,
    PAIN_POINT_KEYWORDS,
    PROBLEM_KEYWORDS,
    SOLUTION_KEYWORDS,
)
from .text import normalize, split_sentences

# Keeps ASCII letters, digits, underscore and any Unicode whitespace
NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")

MIN_FALLBACK_SENTENCE_LENGTH = 20
MIN_KEYWORD_LENGTH = 4


def _first_sentence_with(text: str, keywords: Iterable[str], fallback: str) -> str:
    """
    Return the first sentence containing a trigger keyword.

    Falls back to the first sentence longer than 20 characters, then to
    the fixed fallback string.
    """
    sentences = split_sentences(text)
    keywords = tuple(keywords)

    for sentence in sentences:
        if contains_any(normalize(sentence), keywords):
            return sentence.strip()

    for sentence in sentences:
        stripped = sentence.strip()
        if len(stripped) > MIN_FALLBACK_SENTENCE_LENGTH:
            return stripped

    return fallback


def extract_problem(text: str) -> str:
    """Best-guess problem statement."""
    return _first_sentence_with(text, PROBLEM_KEYWORDS, DEFAULT_PROBLEM)


def extract_solution(text: str) -> str:
    """Best-guess solution statement."""
    return _first_sentence_with(text, SOLUTION_KEYWORDS, DEFAULT_SOLUTION)


def extract_keywords(text: str, limit: int = 10) -> List[str]:
    """
    Rank words longer than three characters by frequency.

    Ties keep first-occurrence order.

    Args:
        text: Free text
        limit: Maximum number of keywords

    Returns:
        Up to `limit` keywords, most frequent first
    """
    words = [
        word for word in NON_WORD.sub("", normalize(text)).split()
        if len(word) >= MIN_KEYWORD_LENGTH
    ]
    return [word for word, _ in Counter(words).most_common(limit)]


def extract_pain_points(text: str, limit: int = 5) -> List[str]:
    """Collect trimmed sentences that describe a pain point."""
    pain_points = [
        sentence.strip()
        for sentence in split_sentences(text)
        if contains_any(normalize(sentence), PAIN_POINT_KEYWORDS)
    ]
    return pain_points[:limit]


def extract_sentences_with_keywords(text: str, keywords: Iterable[str]) -> List[str]:
    """For each keyword, the first sentence mentioning it, without duplicates."""
    sentences = split_sentences(text)
    relevant: List[str] = []

    for keyword in keywords:
        needle = normalize(keyword)
        match = next((s for s in sentences if needle in normalize(s)), None)
        if match is not None and match.strip() not in relevant:
            relevant.append(match.strip())

    return relevant
