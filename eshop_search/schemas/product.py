"""Product record schema - one catalog item as returned by search (REST API contract)."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """Immutable product record built from an Elasticsearch hit's _source."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
        extra="ignore",
    )

    product_id: str | None = Field(None, min_length=1)
    product_name: str | None = None
    price: float | None = Field(None, ge=0)
    category_id: str | None = None
    category_name: str | None = None
    brand: str | None = None
    sales: int | None = None  # Units sold; default ranking key
    stock: int | None = None
    description: str | None = None
