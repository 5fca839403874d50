"""Heuristic FAQ synthesis from product copy.

Each qualifying sentence of the description becomes the *answer* of one FAQ
pair; the *question* is built from a rotating starter word and the
sentence's opening words.  This is best-effort templating, not NLP: the
question is never checked for grammar or for whether the answer actually
addresses it.
"""

import logging
import re
from typing import List, Optional

from seometa.models.faq import FaqPair
from seometa.services.normalizer import normalize

logger = logging.getLogger(__name__)

# Question starters, assigned round-robin by FAQ position.
QUESTION_STARTERS = ("What", "How", "Why", "When", "Where", "Can", "Is")

# Number of leading words of the sentence used as the question topic.
TOPIC_WORDS = 5

MAX_FAQS = 5

# Sentences must be strictly longer than this (after trimming) to qualify.
MIN_SENTENCE_LENGTH = 20

_SENTENCE_END_RE = re.compile(r"[.!?]+")


def split_sentences(text: str) -> List[str]:
    """Return the trimmed sentences of *text* long enough to answer a question."""
    sentences: List[str] = []
    for piece in _SENTENCE_END_RE.split(text):
        stripped = piece.strip()
        if len(stripped) > MIN_SENTENCE_LENGTH:
            sentences.append(stripped)
    return sentences


def _make_question(sentence: str, index: int) -> str:
    starter = QUESTION_STARTERS[index % len(QUESTION_STARTERS)]
    topic = " ".join(sentence.split()[:TOPIC_WORDS]).lower()
    return f"{starter} {topic}?"


def generate_faqs(raw: Optional[str]) -> List[FaqPair]:
    """Build at most :data:`MAX_FAQS` question/answer pairs from *raw*."""
    if not raw:
        return []

    sentences = split_sentences(normalize(raw))[:MAX_FAQS]
    logger.debug("Generating %d FAQ pairs", len(sentences))
    return [
        FaqPair(question=_make_question(sentence, i), answer=sentence)
        for i, sentence in enumerate(sentences)
    ]
