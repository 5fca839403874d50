from typing import List

from pydantic import BaseModel

from seometa.models.faq import FaqPair


class ContentAnalysis(BaseModel):
    summary: str
    keywords: List[str]
    faqs: List[FaqPair]
    word_count: int
