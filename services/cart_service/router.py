"""
Cart endpoints are public (the storefront is anonymous) except for clearing a
whole cart, which only the checkout saga does and which therefore requires the
X-Internal-API-Key header.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.security.dependencies import verify_internal_api_key
from services.catalog_service.service import DocumentNotFoundError

from .schemas import CartItemCreate, CartResponse
from .service import CartService

router = APIRouter()
internal_router = APIRouter(dependencies=[Depends(verify_internal_api_key)])
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "cart", "status": "running"}


async def _require_cart(db: AsyncSession, session_id: str):
    cart = await CartService.get_cart(db, session_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart


@router.post("/", response_model=CartResponse)
async def create_cart(db: AsyncSession = Depends(get_db)):
    return await CartService.create_cart(db)


@router.get("/{session_id}", response_model=CartResponse)
async def get_cart(session_id: str, db: AsyncSession = Depends(get_db)):
    return await _require_cart(db, session_id)


@router.post("/{session_id}/items", response_model=CartResponse)
async def add_item(
    session_id: str, item: CartItemCreate, db: AsyncSession = Depends(get_db)
):
    await _require_cart(db, session_id)
    try:
        return await CartService.add_item(db, session_id, item)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{session_id}/items/{property_id}/{document_id}", response_model=CartResponse)
async def remove_item(
    session_id: str, property_id: str, document_id: str, db: AsyncSession = Depends(get_db)
):
    await _require_cart(db, session_id)
    return await CartService.remove_item(db, session_id, property_id, document_id)


@internal_router.delete("/{session_id}/items", status_code=204)
async def clear_cart(session_id: str, db: AsyncSession = Depends(get_db)):
    """Deletes all items in the session cart."""
    await _require_cart(db, session_id)
    await CartService.clear_cart(db, session_id)
