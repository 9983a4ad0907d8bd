"""
Query builder - typed search request -> Elasticsearch search body.
Bodies are keyword arguments for AsyncElasticsearch.search (ES 8 explicit kwargs, no body merge).
No input validation here: empty keywords or inverted price bounds go to ES as-is.
"""

from typing import Any

from eshop_search.config import Settings
from eshop_search.schemas.search import (
    BrandSearch,
    KeywordSearch,
    PriceRangeSearch,
    SearchRequest,
)

# Name boosted 3x over description and brand
KEYWORD_FIELDS = ["productName^3", "description", "brand"]
NAME_FIELD = "productName"
PRICE_FIELD = "price"
# Non-tokenized sub-field of brand (exact, case-sensitive)
BRAND_EXACT_FIELD = "brand.keyword"
SALES_FIELD = "sales"


def keyword_query(request: KeywordSearch, settings: Settings) -> dict[str, Any]:
    multi_match: dict[str, Any] = {
        "query": request.keyword,
        "fields": KEYWORD_FIELDS,
    }
    if settings.search_analyzer:
        multi_match["analyzer"] = settings.search_analyzer
    return {
        "query": {"multi_match": multi_match},
        "sort": [{SALES_FIELD: {"order": "desc"}}],
    }


def price_range_query(request: PriceRangeSearch, settings: Settings) -> dict[str, Any]:
    """Match on product name. Price bounds are applied to the hits by the result mapper;
    with price_range_in_query they are also sent as a range filter."""
    match = {"match": {NAME_FIELD: {"query": request.keyword}}}
    if not settings.price_range_in_query:
        return {"query": match}
    return {
        "query": {
            "bool": {
                "must": [match],
                "filter": [
                    {"range": {PRICE_FIELD: {"gte": request.min_price, "lte": request.max_price}}}
                ],
            }
        }
    }


def brand_query(request: BrandSearch, settings: Settings) -> dict[str, Any]:
    return {"query": {"term": {BRAND_EXACT_FIELD: {"value": request.brand}}}}


def build_search_body(request: SearchRequest, settings: Settings) -> dict[str, Any]:
    """Return search kwargs (query, optional sort, size) for the given request variant."""
    if isinstance(request, KeywordSearch):
        body = keyword_query(request, settings)
    elif isinstance(request, PriceRangeSearch):
        body = price_range_query(request, settings)
    elif isinstance(request, BrandSearch):
        body = brand_query(request, settings)
    else:
        raise TypeError(f"Unsupported search request: {type(request).__name__}")
    body["size"] = settings.search_page_size
    return body
