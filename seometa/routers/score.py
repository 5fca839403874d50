import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from seometa.models.request import ScoreRequest
from seometa.models.scoring import QualityAssessment
from seometa.services.scoring import assess_content_quality

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/score",
    response_model=QualityAssessment,
    summary="Score rewritten product copy",
    description=(
        "Compares rewritten copy with the original product content and returns "
        "a hallucination-risk score (0.0–1.0), an AI-visibility score (0–100), "
        "a letter grade and improvement recommendations."
    ),
)
@limiter.limit("30/minute")
async def score(request: Request, body: ScoreRequest) -> QualityAssessment:
    logger.info(
        "Score request received",
        extra={"title": body.original_title, "keywords": len(body.keywords)},
    )

    assessment = assess_content_quality(
        body.optimized,
        body.original_title,
        body.original_description,
        body.keywords,
    )
    if assessment.is_high_risk:
        logger.warning(
            "High hallucination risk for %r (%.2f)",
            body.original_title,
            assessment.risk_score,
        )
    return assessment
