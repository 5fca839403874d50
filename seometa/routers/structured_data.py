import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from seometa.models.content_item import ContentItem
from seometa.models.structured_data import ProductRecord
from seometa.services.structured_data import build_structured_data

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/structured-data",
    response_model=ProductRecord,
    summary="Build schema.org Product JSON-LD",
    description=(
        "Maps a product record onto the schema.org `Product` JSON-LD shape.  "
        "The description is stripped of markup and summarised to 150 "
        "characters; `priceCurrency` defaults to `USD`.\n\n"
        "Requests missing `title`, `description`, `sku` or `price` are "
        "rejected with 422 rather than producing partial markup."
    ),
)
@limiter.limit("30/minute")
async def structured_data(request: Request, body: ContentItem) -> dict:
    logger.info("Structured data request received", extra={"sku": body.sku})

    return build_structured_data(body)
