from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from seometa.models.faq import FaqPair

QualityGrade = Literal["A", "B", "C", "D", "F"]


class OptimizedContent(BaseModel):
    """Rewritten copy produced for a product, as scored against its source."""

    summary: Optional[str] = None
    content: Optional[str] = None
    llm_description: Optional[str] = None
    optimized_description: Optional[str] = None
    faqs: List[FaqPair] = Field(default_factory=list)


class QualityAssessment(BaseModel):
    risk_score: float = Field(ge=0.0, le=1.0)
    visibility_score: int = Field(ge=0, le=100)
    is_high_risk: bool
    quality_grade: QualityGrade
    recommendations: List[str]
    timestamp: datetime
