"""Quality scoring for rewritten product copy.

Two independent scores are computed:

``risk_score`` (0.0 – 1.0)
    Hallucination risk: how likely the rewritten copy has drifted away from
    the source content (generic marketing claims, guarantees, large
    expansions, lost keywords).  Higher is worse.

``visibility_score`` (0 – 100)
    How useful the copy is to an AI assistant answering shopper questions
    (complete fields, enough FAQs, practical and technical details).  Higher
    is better.

Both are keyword heuristics over lowercased text.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from seometa.models.scoring import OptimizedContent, QualityAssessment, QualityGrade

# Generic claims that are rarely grounded in the source product data
MARKETING_PHRASES = (
    "best on the market",
    "award-winning",
    "top-rated",
    "perfect for everyone",
    "our #1 product",
    "industry-leading",
    "revolutionary",
    "game-changing",
    "unparalleled quality",
    "premium quality",
    "luxury",
    "exclusive",
)

HYPE_WORDS = ("amazing", "incredible", "perfect")

PRACTICAL_TERMS = ("sizing", "size", "material", "best for", "suitable for", "care", "wash", "fit")

TECHNICAL_TERMS = (
    "gsm",
    "cotton",
    "polyester",
    "wool",
    "dimensions",
    "weight",
    "temperature",
    "breathable",
)

HIGH_RISK_THRESHOLD = 0.7
MODERATE_RISK_THRESHOLD = 0.5

# Rewrites longer than this multiple of the source are penalised
_MAX_EXPANSION_RATIO = 3

_GROUNDED_SUMMARY_MAX = 100
_TITLE_PREFIX_LEN = 10

_GRADE_BANDS = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))


def _is_blank(value: Optional[str]) -> bool:
    return not value or value == "N/A" or not value.strip()


def _combined_text(*parts: Optional[str]) -> str:
    return " ".join(part or "" for part in parts).lower()


def calculate_hallucination_risk(
    optimized: OptimizedContent,
    original_title: str,
    original_description: str,
    keywords: Iterable[str] = (),
) -> float:
    """Return the hallucination risk of *optimized*, rounded to two decimals."""
    score = 0.0
    all_text = _combined_text(
        optimized.summary,
        optimized.content,
        optimized.optimized_description,
        optimized.llm_description,
    )

    for phrase in MARKETING_PHRASES:
        if phrase in all_text:
            score += 0.2

    if any("guarantee" in (faq.question + faq.answer).lower() for faq in optimized.faqs):
        score += 0.2

    original_length = len(original_title or "") + len(original_description or "")
    optimized_length = len(optimized.summary or "") + len(optimized.content or "")
    if original_length > 0 and optimized_length > original_length * _MAX_EXPANSION_RATIO:
        score += 0.2

    summary = optimized.summary or ""
    if summary and original_title and summary.strip().lower() == original_title.strip().lower():
        score += 0.1

    keywords = [kw.lower() for kw in keywords]
    if keywords:
        answers = [faq.answer.lower() for faq in optimized.faqs]
        grounded = any(
            kw in all_text or any(kw in answer for answer in answers) for kw in keywords
        )
        if not grounded:
            score += 0.2

    if (
        summary
        and len(summary) < _GROUNDED_SUMMARY_MAX
        and not any(word in all_text for word in HYPE_WORDS)
        and original_title
        and original_title.lower()[:_TITLE_PREFIX_LEN] in all_text
    ):
        score -= 0.2

    return round(min(1.0, max(0.0, score)), 2)


def calculate_visibility_score(optimized: OptimizedContent) -> int:
    """Return how discoverable *optimized* is for AI assistants (0–100)."""
    score = 100

    for field in (
        optimized.summary,
        optimized.llm_description,
        optimized.content,
        optimized.optimized_description,
    ):
        if _is_blank(field):
            score -= 10

    if len(optimized.faqs) < 2:
        score -= 10

    all_content = _combined_text(
        optimized.content, optimized.optimized_description, optimized.llm_description
    )
    if not any(term in all_content for term in PRACTICAL_TERMS):
        score -= 10

    if len(optimized.faqs) >= 4 and any(
        len(faq.question) > 10
        and len(faq.answer) > 20
        and "what is" not in faq.question.lower()
        and "N/A" not in faq.answer
        for faq in optimized.faqs
    ):
        score += 5

    if any(term in all_content for term in TECHNICAL_TERMS):
        score += 5

    return min(100, max(0, score))


def grade_for(visibility_score: int) -> QualityGrade:
    for floor, grade in _GRADE_BANDS:
        if visibility_score >= floor:
            return grade
    return "F"


def generate_recommendations(risk_score: float, visibility_score: int) -> List[str]:
    """Return human-readable advice for the given pair of scores."""
    recommendations: List[str] = []

    if risk_score > HIGH_RISK_THRESHOLD:
        recommendations.append(
            "High hallucination risk detected - consider reverting to original content"
        )
    elif risk_score > MODERATE_RISK_THRESHOLD:
        recommendations.append(
            "Moderate hallucination risk - review for generic marketing language"
        )

    if visibility_score < 60:
        recommendations.append(
            "Low visibility score - add more practical information and technical details"
        )
    elif visibility_score < 80:
        recommendations.append(
            "Good visibility - consider adding more FAQs or technical specifications"
        )

    if not recommendations:
        recommendations.append("Content quality is excellent - ready for publication")

    return recommendations


def assess_content_quality(
    optimized: OptimizedContent,
    original_title: str,
    original_description: str,
    keywords: Iterable[str] = (),
) -> QualityAssessment:
    """Score *optimized* against its source and bundle the results."""
    risk_score = calculate_hallucination_risk(
        optimized, original_title, original_description, keywords
    )
    visibility_score = calculate_visibility_score(optimized)
    return QualityAssessment(
        risk_score=risk_score,
        visibility_score=visibility_score,
        is_high_risk=risk_score > HIGH_RISK_THRESHOLD,
        quality_grade=grade_for(visibility_score),
        recommendations=generate_recommendations(risk_score, visibility_score),
        timestamp=datetime.now(timezone.utc),
    )
