"""
Pytest fixtures - fake Elasticsearch, app client.
Isolated tests: no real Elasticsearch; the search service gets an in-memory fake via dependency overrides.
"""

from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from eshop_search.main import app
from eshop_search.search.elasticsearch_client import get_elasticsearch


def hit(doc: dict[str, Any], index: str = "product_v1") -> dict[str, Any]:
    """Wrap a source document the way ES returns it in hits.hits."""
    return {"_index": index, "_id": doc.get("productId"), "_score": 1.0, "_source": doc}


def product_doc(product_id: str, **fields: Any) -> dict[str, Any]:
    doc = {
        "productId": product_id,
        "productName": f"product {product_id}",
        "price": 10.0,
        "categoryId": "c01",
        "categoryName": "手机",
        "brand": "Acme",
        "sales": 0,
        "stock": 5,
        "description": "",
    }
    doc.update(fields)
    return doc


class FakeElasticsearch:
    """Records search kwargs and returns canned hits (or raises a canned error)."""

    def __init__(self):
        self.docs: list[dict[str, Any]] = []
        self.error: Exception | None = None
        self.alive = True
        self.calls: list[dict[str, Any]] = []

    async def search(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        hits = [hit(doc) for doc in self.docs]
        return {"hits": {"total": {"value": len(hits), "relation": "eq"}, "hits": hits}}

    async def ping(self) -> bool:
        return self.alive


@pytest.fixture
def fake_es() -> FakeElasticsearch:
    return FakeElasticsearch()


@pytest_asyncio.fixture
async def client(fake_es: FakeElasticsearch):
    app.dependency_overrides[get_elasticsearch] = lambda: fake_es
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
