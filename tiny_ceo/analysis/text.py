"""Text normalization helpers shared by every extractor and classifier."""

import re
from typing import List

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def normalize(text: str) -> str:
    """Lower-case text for substring matching."""
    return text.lower()


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences on runs of '.', '!' and '?'.

    Empty and whitespace-only segments are discarded. Sentences are
    returned untrimmed; callers trim what they return to the user.

    Args:
        text: Free text

    Returns:
        Ordered list of sentences (possibly empty)
    """
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())
