"""
Search endpoints - keyword, price range and brand product search via Elasticsearch.
Design: Thin controller; service layer holds query building and result mapping.
"""

from typing import Annotated

from elasticsearch import AsyncElasticsearch
from fastapi import APIRouter, Depends, Query

from eshop_search.config import Settings, get_settings
from eshop_search.schemas.product import Product
from eshop_search.search.elasticsearch_client import get_elasticsearch
from eshop_search.services.product_search_service import ProductSearchService

router = APIRouter()


def get_product_search_service(
    es: Annotated[AsyncElasticsearch, Depends(get_elasticsearch)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ProductSearchService:
    """Factory for service with client injection (Dependency Inversion)."""
    return ProductSearchService(es, settings)


SearchService = Annotated[ProductSearchService, Depends(get_product_search_service)]


@router.get("/keyword", response_model=list[Product])
async def search_by_keyword(svc: SearchService, keyword: str = Query(...)):
    """Full-text search on name (boosted), description and brand; sorted by sales desc."""
    return await svc.search_by_keyword(keyword)


@router.get("/price", response_model=list[Product])
async def search_by_price_range(
    svc: SearchService,
    keyword: str = Query(...),
    min_price: float = Query(..., alias="minPrice"),
    max_price: float = Query(..., alias="maxPrice"),
):
    """Name search filtered to minPrice <= price <= maxPrice. REST: GET /search/price?keyword=&minPrice=&maxPrice=."""
    return await svc.search_by_price_range(keyword, min_price, max_price)


@router.get("/brand", response_model=list[Product])
async def search_by_brand(svc: SearchService, brand: str = Query(...)):
    """Exact brand match."""
    return await svc.search_by_brand(brand)
