"""Frequency-ranked keyword extraction.

Tokens are maximal runs of word characters, lowercased.  Short tokens
(articles, prepositions, most stop words) are dropped by length alone; there
is no language-specific stop-word list.
"""

import re
from collections import Counter
from typing import List, Optional

from seometa.services.normalizer import normalize

DEFAULT_KEYWORD_COUNT = 10

# Tokens must be strictly longer than this to count as keyword candidates.
MIN_TOKEN_LENGTH = 3

_SPLIT_RE = re.compile(r"\W+")


def tokenize(text: str) -> List[str]:
    """Split *text* into lowercase keyword candidates, in order of appearance."""
    return [
        token
        for token in _SPLIT_RE.split(text.lower())
        if len(token) > MIN_TOKEN_LENGTH
    ]


def extract_keywords(raw: Optional[str], count: int = DEFAULT_KEYWORD_COUNT) -> List[str]:
    """Return up to *count* of the most frequent tokens in *raw*.

    Equal counts keep first-occurrence order, so identical input always
    yields the same ranking.
    """
    if count <= 0:
        return []

    # Counter preserves insertion order and most_common() sorts stably
    frequency: Counter = Counter(tokenize(normalize(raw)))
    return [word for word, _ in frequency.most_common(count)]
