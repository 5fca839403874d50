"""schema.org JSON-LD builders for product pages."""

from typing import Any, Dict, Mapping, Sequence, Union

from seometa.models.content_item import ContentItem
from seometa.models.faq import FaqPair
from seometa.models.structured_data import (
    Answer,
    FaqPageRecord,
    Offer,
    ProductRecord,
    Question,
)
from seometa.services.summarizer import summarize


def build_structured_data(item: Union[ContentItem, Mapping[str, Any]]) -> Dict[str, Any]:
    """Return the schema.org ``Product`` JSON-LD record for *item*.

    Plain mappings are validated into a :class:`ContentItem` first, so a
    record with missing or malformed required fields raises
    :class:`pydantic.ValidationError` instead of producing partial markup.
    The description is always summarised with the default bound.
    """
    if not isinstance(item, ContentItem):
        item = ContentItem.model_validate(item)

    record = ProductRecord(
        name=item.title,
        description=summarize(item.description),
        sku=item.sku,
        offers=Offer(
            price=float(item.price),
            price_currency=item.currency,
            availability="InStock" if item.available else "OutOfStock",
        ),
    )
    return record.model_dump(by_alias=True)


def build_faq_page(faqs: Sequence[FaqPair]) -> Dict[str, Any]:
    """Return a schema.org ``FAQPage`` JSON-LD record for *faqs*."""
    record = FaqPageRecord(
        main_entity=[
            Question(name=faq.question, accepted_answer=Answer(text=faq.answer))
            for faq in faqs
        ]
    )
    return record.model_dump(by_alias=True)
