from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from shared.provider import ProviderClient, ProviderError, ProviderUnavailable, get_provider_client
from shared.security import limiter
from .mock_data import TEST_SCENARIOS
from .schemas import SearchResponse, SearchStatusResponse, SearchScenario
from .service import PropertySearchService

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "search", "status": "running"}


@router.get("/", response_model=SearchResponse)
@limiter.limit("30/minute")
async def search(
    request: Request,  # slowapi needs this to resolve the client IP
    q: str = Query(default=""),
    provider: ProviderClient = Depends(get_provider_client)
):
    return await PropertySearchService.search(provider, q)


@router.get("/scenarios", response_model=List[SearchScenario])
async def list_scenarios():
    return TEST_SCENARIOS


@router.get("/status/{order_id}", response_model=SearchStatusResponse)
async def search_status(order_id: str, provider: ProviderClient = Depends(get_provider_client)):
    try:
        return await PropertySearchService.poll_status(provider, order_id)
    except ProviderError as e:
        raise HTTPException(status_code=502, detail=f"Provider Error: {e.reason or e.status_code}")
    except ProviderUnavailable:
        raise HTTPException(status_code=502, detail="Failed to connect to Property Provider")
