import time

import structlog

from shared.config import settings
from shared.provider import ProviderError, ProviderUnavailable
from shared.security import internal_headers
from .saga import SagaOrchestrator
from .repository import OrderRepository
from .service import OrderService

logger = structlog.get_logger(__name__)


class EmptyCartError(Exception):
    pass


async def local_order_id(db) -> str:
    number = await OrderRepository.next_order_number(db)
    return f"ORD-{number:06d}"


def provider_order_payload(item: dict) -> dict:
    # The provider takes one property per order; the first cart item drives it
    return {
        "titleReference": item.get("title_reference"),
        "street": item.get("street"),
        "suburb": item.get("suburb"),
        "state": item.get("state"),
        "postcode": item.get("postcode"),
        "clientReference": f"TitleFlow-Order-{int(time.time() * 1000)}",
    }

# --- ACTIONS ---

async def fetch_cart(ctx: dict):
    client, session_id = ctx["client"], ctx["session_id"]
    resp = await client.get(f"{settings.CART_URL}/{session_id}")
    if resp.status_code == 404:
        raise EmptyCartError("Cart is empty")
    resp.raise_for_status()
    items = resp.json().get("items", [])
    if not items:
        raise EmptyCartError("Cart is empty")
    ctx["items"] = items

async def place_provider_order(ctx: dict):
    provider, items = ctx["provider"], ctx["items"]
    ctx["provider_order"] = False

    if settings.USE_MOCK_API:
        ctx["order_id"] = await local_order_id(ctx["db"])
        return

    try:
        data = await provider.place_order(provider_order_payload(items[0]))
    except (ProviderError, ProviderUnavailable) as e:
        logger.warning("provider_order_failed_using_local_id", error=str(e))
        ctx["order_id"] = await local_order_id(ctx["db"])
        return

    order_id = data.get("orderId") or (data.get("order") or {}).get("orderId")
    ctx["provider_order"] = bool(order_id)
    ctx["order_id"] = str(order_id) if order_id else await local_order_id(ctx["db"])

async def create_order(ctx: dict):
    db = ctx["db"]
    ctx["order"] = await OrderService.create_order(db, ctx["order_id"], ctx["session_id"], ctx["items"])

async def clear_cart(ctx: dict):
    client, session_id = ctx["client"], ctx["session_id"]
    resp = await client.delete(f"{settings.CART_URL}/{session_id}/items", headers=internal_headers())
    resp.raise_for_status()

async def schedule_fulfilment(ctx: dict):
    ctx["scheduler"].schedule(ctx["order_id"])


# --- COMPENSATIONS (Rollbacks) ---

async def cancel_provider_order(ctx: dict):
    if ctx.get("provider_order"):
        # The enquiry API has no cancel endpoint; the order has to be voided by the provider's support desk
        logger.warning("provider_order_cancel_intent", order_id=ctx["order_id"])

async def fail_order(ctx: dict):
    if ctx.get("order") is not None:
        await OrderRepository.mark_failed(ctx["db"], ctx["order_id"])

async def restore_cart(ctx: dict):
    client, session_id = ctx["client"], ctx["session_id"]
    for item in ctx.get("items", []):
        payload = {
            "property": {
                "id": item["property_id"],
                "full_address": item["address"],
                "street": item.get("street") or "",
                "suburb": item.get("suburb") or "",
                "state": item.get("state") or "",
                "postcode": item.get("postcode") or "",
                "title_reference": item.get("title_reference"),
                "lot_plan": item.get("lot_plan"),
            },
            "document_id": item["document"]["id"],
        }
        await client.post(f"{settings.CART_URL}/{session_id}/items", json=payload)


# --- BUILDER FACTORY ---

def build_checkout_saga() -> SagaOrchestrator:
    saga = SagaOrchestrator()
    saga.add_step("fetch_cart", fetch_cart, None) # Read-only, no rollback needed
    saga.add_step("place_provider_order", place_provider_order, cancel_provider_order)
    saga.add_step("create_order", create_order, fail_order)
    saga.add_step("clear_cart", clear_cart, restore_cart)
    saga.add_step("schedule_fulfilment", schedule_fulfilment, None)
    return saga
