"""
BDD step definitions for the product search feature (pytest-bdd).
Steps drive the search service against the in-memory fake Elasticsearch.
"""

import asyncio

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from conftest import FakeElasticsearch, product_doc
from eshop_search.config import Settings
from eshop_search.services.product_search_service import ProductSearchService

# Load all scenarios from the feature file
scenarios("../features/search.feature")


def _numbers(text: str) -> list[float | None]:
    return [None if v.strip() == "none" else float(v) for v in text.split(",")]


@pytest.fixture
def service(fake_es: FakeElasticsearch) -> ProductSearchService:
    return ProductSearchService(fake_es, Settings(products_index="product_v1"))


@pytest.fixture
def result():
    """Store last search result for then steps."""
    return {}


@given(parsers.parse("the index returns products with sales {sales}"))
def products_with_sales(fake_es, sales):
    fake_es.docs = [product_doc(f"p{i}", sales=int(s)) for i, s in enumerate(_numbers(sales))]


@given(parsers.parse("the index returns products priced {prices}"))
def products_with_prices(fake_es, prices):
    fake_es.docs = [product_doc(f"p{i}", price=p) for i, p in enumerate(_numbers(prices))]


@given("the index returns no products")
def no_products(fake_es):
    fake_es.docs = []


@when(parsers.parse('I search by keyword "{keyword}" priced between {low:g} and {high:g}'))
def search_price_range(service, result, keyword, low, high):
    result["products"] = asyncio.run(service.search_by_price_range(keyword, low, high))


@when(parsers.parse('I search by keyword "{keyword}"'))
def search_keyword(service, result, keyword):
    result["products"] = asyncio.run(service.search_by_keyword(keyword))


@when(parsers.parse('I search by brand "{brand}"'))
def search_brand(service, result, brand):
    result["products"] = asyncio.run(service.search_by_brand(brand))


@then(parsers.parse("the result sales are {sales}"))
def result_sales(result, sales):
    assert [p.sales for p in result["products"]] == [int(s) for s in _numbers(sales)]


@then(parsers.parse("the result prices are {prices}"))
def result_prices(result, prices):
    assert [p.price for p in result["products"]] == _numbers(prices)


@then("the result is empty")
def result_empty(result):
    assert result["products"] == []
