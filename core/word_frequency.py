"""Word frequency analysis feeding the word cloud.

Updates: v0.1.0 - 2026-10-16 - Count significant words with an English stopword filter.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import TYPE_CHECKING

from models.word_cloud_model import WordFrequency

from .exceptions import WordCloudError

if TYPE_CHECKING:
    from collections.abc import Collection

logger = logging.getLogger(__name__)

STOPWORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
        "be", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "may", "might", "must", "shall", "can", "need",
        "it", "its", "this", "that", "these", "those", "i", "you", "he",
        "she", "we", "they", "me", "him", "her", "us", "them", "my", "your",
        "his", "our", "their", "what", "which", "who", "whom", "whose",
        "where", "when", "why", "how", "all", "each", "every", "both", "few",
        "more", "most", "other", "some", "such", "no", "nor", "not", "only",
        "own", "same", "so", "than", "too", "very", "just", "also", "now",
        "then", "here", "there", "into", "out", "up", "down", "about", "after",
        "before", "over", "under", "again", "further", "once", "if",
    }
)  # fmt: skip

# Runs of letters and digits; underscores and punctuation split tokens.
_TOKEN_PATTERN = re.compile(r"[^\W_]+")


def tokenize(text: str) -> list[str]:
    """Return lower-cased alphanumeric tokens from *text*."""
    return _TOKEN_PATTERN.findall(text.lower())


def analyze_word_frequencies(
    text: str,
    top_n: int = 50,
    *,
    min_length: int = 3,
    stopwords: Collection[str] = STOPWORDS,
) -> list[WordFrequency]:
    """Return the *top_n* most frequent significant words in *text*.

    Words shorter than *min_length* and members of *stopwords* are ignored
    both for counting and for the percentage denominator. Words with equal
    counts keep the order in which they first appear.
    """
    if top_n < 1:
        raise WordCloudError(f"top_n must be at least 1, got {top_n}")
    if not text.strip():
        return []

    words = [
        token
        for token in tokenize(text)
        if len(token) >= min_length and token not in stopwords
    ]
    counts = Counter(words)
    total = len(words)
    frequencies = [
        WordFrequency(
            word=word,
            count=count,
            percentage=(count / total) * 100 if total else 0.0,
        )
        for word, count in counts.most_common(top_n)
    ]
    logger.debug(
        "Analysed %d significant token(s); %d distinct, returning %d",
        total,
        len(counts),
        len(frequencies),
    )
    return frequencies


__all__ = ["STOPWORDS", "analyze_word_frequencies", "tokenize"]
