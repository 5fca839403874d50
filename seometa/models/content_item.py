import math
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CURRENCY = "USD"


class ContentItem(BaseModel):
    """A product-like record as supplied by the storefront.

    Instances are frozen; the pipeline only ever reads them.  String fields
    are stripped, so a whitespace-only ``title`` or ``sku`` is rejected.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(min_length=1)
    description: str = Field(description="Raw description markup; may be empty.")
    sku: str = Field(min_length=1)
    price: Decimal = Field(ge=0)
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        pattern=r"^[A-Z]{3}$",
        description="ISO 4217 currency code.",
    )
    available: bool = False

    @field_validator("price")
    @classmethod
    def _price_fits_json_number(cls, value: Decimal) -> Decimal:
        # JSON-LD carries the price as a float
        if not math.isfinite(float(value)):
            raise ValueError("price is too large to be represented as a JSON number")
        return value

    @field_validator("currency", mode="before")
    @classmethod
    def _default_currency(cls, value: Optional[str]) -> str:
        if not value:
            return DEFAULT_CURRENCY
        return str(value).upper()
