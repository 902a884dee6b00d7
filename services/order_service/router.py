from typing import List

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.provider import ProviderClient, ProviderError, ProviderUnavailable, get_provider_client
from .checkout import CheckoutService
from .checkout_saga import EmptyCartError
from .schemas import CheckoutRequest, OrderResponse
from .service import OrderService, ItemNotReadyError

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)


async def get_service_client():
    """HTTP client for calls to sibling services (the cart service)."""
    async with httpx.AsyncClient(timeout=15.0) as client:
        yield client


@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "order", "status": "running"}


@router.post("/checkout", response_model=OrderResponse)
async def checkout(
    payload: CheckoutRequest,
    db: AsyncSession = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_service_client),
    provider: ProviderClient = Depends(get_provider_client)
):
    try:
        return await CheckoutService.checkout(db, client, provider, payload.session_id)
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        # Saga already rolled back internally; the details are in the logs
        raise HTTPException(status_code=502, detail="Checkout failed. Please try again.")


@router.get("/", response_model=List[OrderResponse])
async def list_orders(session_id: str = Query(...), db: AsyncSession = Depends(get_db)):
    """Orders for one storefront session, newest first."""
    return await OrderService.list_orders(db, session_id)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, db: AsyncSession = Depends(get_db)):
    order = await OrderService.get_order(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/{order_id}/items/{item_id}/download")
async def download_item(
    order_id: str,
    item_id: int,
    db: AsyncSession = Depends(get_db),
    provider: ProviderClient = Depends(get_provider_client)
):
    order = await OrderService.get_order(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    item = next((i for i in order.items if i.id == item_id), None)
    if not item:
        raise HTTPException(status_code=404, detail="Order item not found")

    try:
        download = await OrderService.download_document(provider, order, item)
    except ItemNotReadyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (ProviderError, ProviderUnavailable):
        raise HTTPException(status_code=502, detail="Failed to download document. Please try again.")

    return Response(
        content=download.content,
        media_type=download.media_type,
        headers={"Content-Disposition": download.disposition}
    )
