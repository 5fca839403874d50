from typing import List

from pydantic import BaseModel, Field

from seometa.constants import (
    DEFAULT_MODEL,
    DEFAULT_PLATFORM,
    DEFAULT_TONE,
    LlmModel,
    TargetPlatform,
    ToneStyle,
)
from seometa.models.scoring import OptimizedContent
from seometa.services.keywords import DEFAULT_KEYWORD_COUNT
from seometa.services.summarizer import DEFAULT_MAX_LENGTH


class AnalyzeRequest(BaseModel):
    content: str = Field(default="", description="Raw product or collection description (HTML allowed).")
    target_model: LlmModel = DEFAULT_MODEL
    tone: ToneStyle = DEFAULT_TONE
    target_platform: TargetPlatform = DEFAULT_PLATFORM
    summary_length: int = Field(
        default=DEFAULT_MAX_LENGTH,
        ge=3,
        le=500,
        description="Maximum summary length in characters (3–500).",
    )
    keyword_count: int = Field(
        default=DEFAULT_KEYWORD_COUNT,
        ge=1,
        le=50,
        description="Maximum number of keywords to return (1–50).",
    )


class ScoreRequest(BaseModel):
    original_title: str
    original_description: str = ""
    optimized: OptimizedContent
    keywords: List[str] = Field(
        default_factory=list,
        description="Keywords the rewrite is expected to preserve.",
    )
