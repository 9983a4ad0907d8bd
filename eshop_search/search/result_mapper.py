"""
Result mapper - Elasticsearch hits -> ordered Product records.
Applies the post-filtering the engine query does not express (price bounds).
"""

import logging
from typing import Any, Iterable

from pydantic import ValidationError

from eshop_search.schemas.product import Product
from eshop_search.schemas.search import KeywordSearch, PriceRangeSearch, SearchRequest

logger = logging.getLogger(__name__)


def _hits(response: Any) -> list[dict[str, Any]]:
    # Response may be ObjectApiResponse; support both .body and dict access
    body = getattr(response, "body", response)
    return body["hits"]["hits"]


def hits_to_products(hits: Iterable[dict[str, Any]]) -> list[Product]:
    """Map each hit's _source to a Product, keeping engine order.
    Hits without _source or with a document that is not a valid Product are skipped."""
    products = []
    for hit in hits:
        source = hit.get("_source")
        if source is None:
            continue
        try:
            products.append(Product.model_validate(source))
        except ValidationError as e:
            logger.warning("skipping invalid product hit _id=%s: %s", hit.get("_id"), e)
    return products


def in_price_range(product: Product, min_price: float, max_price: float) -> bool:
    """Inclusive bounds; a product without a price never matches."""
    if product.price is None:
        return False
    return min_price <= product.price <= max_price


def by_sales_desc(products: list[Product]) -> list[Product]:
    """Stable sort by sales, highest first; products without sales go last (as ES sorts missing values)."""
    return sorted(
        products,
        key=lambda p: (p.sales is None, -(p.sales or 0)),
    )


def map_response(response: Any, request: SearchRequest) -> list[Product]:
    """Convert a search response into the product list for this request. Never mutates the response."""
    products = hits_to_products(_hits(response))
    if isinstance(request, KeywordSearch):
        return by_sales_desc(products)
    if isinstance(request, PriceRangeSearch):
        return [p for p in products if in_price_range(p, request.min_price, request.max_price)]
    return products
