"""schema.org JSON-LD shapes.

Field order matches the serialised key order expected by downstream SEO
consumers; dump with ``by_alias=True`` to get the ``@``-prefixed keys.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

SCHEMA_CONTEXT = "https://schema.org/"

Availability = Literal["InStock", "OutOfStock"]


class _JsonLdModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Offer(_JsonLdModel):
    type: Literal["Offer"] = Field(default="Offer", alias="@type")
    price: float
    price_currency: str = Field(alias="priceCurrency")
    availability: Availability


class ProductRecord(_JsonLdModel):
    context: str = Field(default=SCHEMA_CONTEXT, alias="@context")
    type: Literal["Product"] = Field(default="Product", alias="@type")
    name: str
    description: str
    sku: str
    offers: Offer


class Answer(_JsonLdModel):
    type: Literal["Answer"] = Field(default="Answer", alias="@type")
    text: str


class Question(_JsonLdModel):
    type: Literal["Question"] = Field(default="Question", alias="@type")
    name: str
    accepted_answer: Answer = Field(alias="acceptedAnswer")


class FaqPageRecord(_JsonLdModel):
    context: str = Field(default=SCHEMA_CONTEXT, alias="@context")
    type: Literal["FAQPage"] = Field(default="FAQPage", alias="@type")
    main_entity: List[Question] = Field(default_factory=list, alias="mainEntity")
