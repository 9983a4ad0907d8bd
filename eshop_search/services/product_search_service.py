"""
Product search service - the three search use cases (SOLID: Single Responsibility).
Flow per call: build query -> one ES search on the product index -> map hits.
Design: ES client injected at construction; engine errors propagate to the caller (no retry, no fallback).
"""

import logging

from elasticsearch import AsyncElasticsearch

from eshop_search.config import Settings
from eshop_search.schemas.product import Product
from eshop_search.schemas.search import (
    BrandSearch,
    KeywordSearch,
    PriceRangeSearch,
    SearchRequest,
)
from eshop_search.search.query_builder import build_search_body
from eshop_search.search.result_mapper import map_response

logger = logging.getLogger(__name__)


class ProductSearchService:
    """Keyword, price-range and brand search over the product index."""

    def __init__(self, es: AsyncElasticsearch, settings: Settings):
        self.es = es
        self.settings = settings
        self.index = settings.products_index

    async def search(self, request: SearchRequest) -> list[Product]:
        """Run any typed search request. All-or-nothing: full result list or the ES exception."""
        body = build_search_body(request, self.settings)
        logger.debug("search index=%s body=%s", self.index, body)
        response = await self.es.search(index=self.index, **body)
        products = map_response(response, request)
        logger.info(
            "%s on %s returned %d products",
            type(request).__name__,
            self.index,
            len(products),
        )
        return products

    async def search_by_keyword(self, keyword: str) -> list[Product]:
        """Weighted full-text match on name/description/brand, best sellers first."""
        return await self.search(KeywordSearch(keyword=keyword))

    async def search_by_price_range(
        self, keyword: str, min_price: float, max_price: float
    ) -> list[Product]:
        """Name match, keeping only products priced within [min_price, max_price]."""
        return await self.search(
            PriceRangeSearch(keyword=keyword, min_price=min_price, max_price=max_price)
        )

    async def search_by_brand(self, brand: str) -> list[Product]:
        """Exact brand match (case-sensitive)."""
        return await self.search(BrandSearch(brand=brand))
