"""
Stateless forwarders to the title-search provider.

Each endpoint reshapes the incoming request into the provider's body/headers,
forwards it, and relays the provider's answer (or a generic error).
Credentials are injected by the provider client; callers never send them.
"""
import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
import structlog

from shared.provider import ProviderClient, ProviderError, ProviderUnavailable, get_provider_client
from shared.security import limiter
from services.search_service.address_parser import parse_address, to_provider_request

logger = structlog.get_logger(__name__)

router = APIRouter()


def _error(message: str, status_code: int, **extra) -> JSONResponse:
    return JSONResponse({"error": message, **extra}, status_code=status_code)


@router.get("/search")
@limiter.limit("30/minute")
async def proxy_search(request: Request, q: str = "", provider: ProviderClient = Depends(get_provider_client)):
    if not q:
        return _error("Query parameter required", 400)

    logger.info("proxy_search", query=q)
    state, body = to_provider_request(parse_address(q))
    try:
        data = await provider.search_address(state, body)
    except ProviderError as e:
        return _error(f"Provider Error: {e.reason}", e.status_code, details=e.detail)
    except ProviderUnavailable:
        return _error("Failed to connect to Property Provider", 500)
    return JSONResponse(data, status_code=200)


@router.post("/order")
async def proxy_order(request: Request, provider: ProviderClient = Depends(get_provider_client)):
    try:
        body = await request.json()
    except ValueError:
        return _error("Invalid JSON body", 400)

    try:
        data = await provider.place_order(body)
    except ProviderError as e:
        # Validation errors from the enquiry API are structured; pass them through untouched
        try:
            return JSONResponse(json.loads(e.detail), status_code=e.status_code)
        except ValueError:
            return _error("Failed to place order", 500)
    except ProviderUnavailable:
        return _error("Failed to place order", 500)
    return JSONResponse(data, status_code=200)


@router.get("/status")
async def proxy_status(orderId: str = "", provider: ProviderClient = Depends(get_provider_client)):
    if not orderId:
        return _error("Order ID required", 400)

    logger.info("proxy_status", order_id=orderId)
    try:
        data = await provider.get_search_status(orderId)
    except ProviderError as e:
        return _error(e.reason or "Provider Error", e.status_code)
    except ProviderUnavailable as e:
        return _error(str(e), 500)
    return JSONResponse(data, status_code=200)


@router.get("/download")
async def proxy_download(orderId: str = "", provider: ProviderClient = Depends(get_provider_client)):
    if not orderId:
        return _error("Order ID required", 400)

    try:
        download = await provider.download(orderId)
    except ProviderError as e:
        return _error("Download failed", e.status_code)
    except ProviderUnavailable:
        return _error("Failed to download document", 500)

    return Response(
        content=download.content,
        status_code=200,
        headers={
            "Content-Type": download.content_type or "application/octet-stream",
            "Content-Disposition": download.content_disposition or f'attachment; filename="document-{orderId}.pdf"',
        },
    )
