from typing import Any, Dict, List

from pydantic import BaseModel

from seometa.constants import LlmModel, TargetPlatform, ToneStyle
from seometa.models.faq import FaqPair


class AnalyzeResponse(BaseModel):
    summary: str
    keywords: List[str]
    faqs: List[FaqPair]
    word_count: int
    target_model: LlmModel
    tone: ToneStyle
    target_platform: TargetPlatform
    faq_schema: Dict[str, Any]
    """schema.org ``FAQPage`` JSON-LD built from :attr:`faqs`."""


class SettingsResponse(BaseModel):
    llm_models: List[Dict[str, Any]]
    tone_styles: List[Dict[str, str]]
    target_platforms: List[Dict[str, str]]
