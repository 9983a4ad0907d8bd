"""Typed search requests - one variant per supported query shape."""

from pydantic import BaseModel, ConfigDict


class KeywordSearch(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str


class PriceRangeSearch(BaseModel):
    """Keyword match plus inclusive price bounds. min_price <= max_price is not enforced."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    min_price: float
    max_price: float


class BrandSearch(BaseModel):
    model_config = ConfigDict(frozen=True)

    brand: str


SearchRequest = KeywordSearch | PriceRangeSearch | BrandSearch
