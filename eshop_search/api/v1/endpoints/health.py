"""
Health checks - for load balancers, Kubernetes, and monitoring.
Fast liveness; readiness checks that Elasticsearch answers.
"""

from typing import Annotated

from elasticsearch import AsyncElasticsearch
from fastapi import APIRouter, Depends, HTTPException, status

from eshop_search.config import get_settings
from eshop_search.search.elasticsearch_client import get_elasticsearch

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(es: Annotated[AsyncElasticsearch, Depends(get_elasticsearch)]):
    """Readiness: can we reach the search engine?"""
    if not await es.ping():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Search engine unavailable",
        )
    return {"status": "ready"}
