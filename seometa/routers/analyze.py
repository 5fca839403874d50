import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from seometa.constants import LLM_MODELS, TARGET_PLATFORMS, TONE_STYLES
from seometa.models.request import AnalyzeRequest
from seometa.models.response import AnalyzeResponse, SettingsResponse
from seometa.services.analyzer import analyze_content
from seometa.services.structured_data import build_faq_page

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Extract summary, keywords and FAQs from product copy",
    description=(
        "Strips markup from `content` and returns a bounded summary, the most "
        "frequent keywords and up to five synthesised FAQ pairs, together with "
        "a schema.org `FAQPage` record.\n\n"
        "Empty content is not an error: every field is returned empty."
    ),
)
@limiter.limit("30/minute")
async def analyze(request: Request, body: AnalyzeRequest) -> AnalyzeResponse:
    logger.info(
        "Analyze request received",
        extra={
            "content_length": len(body.content),
            "target_model": body.target_model,
            "target_platform": body.target_platform,
        },
    )

    analysis = analyze_content(
        body.content,
        summary_length=body.summary_length,
        keyword_count=body.keyword_count,
    )

    return AnalyzeResponse(
        summary=analysis.summary,
        keywords=analysis.keywords,
        faqs=analysis.faqs,
        word_count=analysis.word_count,
        target_model=body.target_model,
        tone=body.tone,
        target_platform=body.target_platform,
        faq_schema=build_faq_page(analysis.faqs),
    )


@router.get("/settings", response_model=SettingsResponse, summary="List optimisation settings")
async def settings() -> SettingsResponse:
    """Return the selectable target models, tone styles and target platforms."""
    return SettingsResponse(
        llm_models=[model._asdict() for model in LLM_MODELS],
        tone_styles=[option._asdict() for option in TONE_STYLES],
        target_platforms=[option._asdict() for option in TARGET_PLATFORMS],
    )
