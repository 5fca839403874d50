from pydantic import BaseModel


class FaqPair(BaseModel):
    question: str
    answer: str  # verbatim source sentence, trimmed
