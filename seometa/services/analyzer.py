import logging
from typing import Optional

from seometa.models.analysis import ContentAnalysis
from seometa.services.faq import generate_faqs
from seometa.services.keywords import DEFAULT_KEYWORD_COUNT, extract_keywords
from seometa.services.normalizer import normalize
from seometa.services.summarizer import DEFAULT_MAX_LENGTH, summarize

logger = logging.getLogger(__name__)


def analyze_content(
    raw: Optional[str],
    summary_length: int = DEFAULT_MAX_LENGTH,
    keyword_count: int = DEFAULT_KEYWORD_COUNT,
) -> ContentAnalysis:
    """Run the summary, keyword and FAQ transforms over one piece of content.

    Returns:
        A :class:`ContentAnalysis`; every field is empty when *raw* is empty.
    """
    analysis = ContentAnalysis(
        summary=summarize(raw, summary_length),
        keywords=extract_keywords(raw, keyword_count),
        faqs=generate_faqs(raw),
        word_count=len(normalize(raw).split()),
    )
    logger.debug(
        "Analysed content: %d words, %d keywords, %d FAQs",
        analysis.word_count,
        len(analysis.keywords),
        len(analysis.faqs),
    )
    return analysis
