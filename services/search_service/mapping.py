"""
Shapes provider payloads into ``AddressResult`` records.

The provider answers an address search in one of several shapes depending on
how far the underlying order got: a ``properties`` list, ``relatedTitles``,
``titleOrders`` (when it auto-ordered), or just a ``status`` while the order
is still running.
"""
import uuid
from typing import List, Optional, Tuple

from .schemas import AddressResult, SearchStatusResponse

PENDING_STATUSES = ("Pending", "Waiting")


def random_id() -> str:
    return uuid.uuid4().hex[:9]


def _attribute(prop: dict, key: str):
    attributes = prop.get("attributes") or {}
    return attributes.get(key)


def map_property(prop: dict, fallback_address: str) -> AddressResult:
    address = prop.get("address") or {}
    return AddressResult(
        id=str(prop.get("propertyId") or random_id()),
        full_address=address.get("fullAddress") or prop.get("description") or fallback_address,
        street=address.get("street") or "",
        suburb=address.get("suburb") or "",
        state=address.get("state") or "",
        postcode=address.get("postcode") or "",
        title_reference=(
            prop.get("titleReference")
            or prop.get("titleRef")
            or _attribute(prop, "titleReference")
            or prop.get("display")
        ),
        lot_plan=prop.get("lotPlan") or prop.get("planLabel") or _attribute(prop, "lotPlan"),
    )


def _extract_properties(data: dict) -> List[dict]:
    if data.get("properties"):
        return data["properties"]
    if data.get("relatedTitles"):
        return [
            {"titleReference": t.get("titleReference"), "display": f"Title {t.get('titleReference')}"}
            for t in data["relatedTitles"]
        ]
    if isinstance(data.get("titleOrders"), list) and data["titleOrders"]:
        return [
            {
                "titleReference": t.get("titleReference"),
                "display": f"Order {t.get('orderId')} - {t.get('status')}",
            }
            for t in data["titleOrders"]
        ]
    return []


def pending_placeholder(query: str, order_id: Optional[str]) -> AddressResult:
    return AddressResult(
        id=str(order_id or "pending"),
        full_address=query,
        street="Processing...",
        title_reference=f"PENDING (Order {order_id})",
        lot_plan="Checking...",
    )


def map_search_payload(data: dict, query: str) -> Tuple[List[AddressResult], Optional[str]]:
    """Returns ``(results, pending_order_id)``."""
    props = _extract_properties(data)
    if props:
        return [map_property(p, query) for p in props], None

    if data.get("status") in PENDING_STATUSES:
        order_id = data.get("orderId")
        return [pending_placeholder(query, order_id)], (str(order_id) if order_id else None)

    return [], None


def map_status_payload(order_id: str, data: dict) -> SearchStatusResponse:
    status = data.get("status") or data.get("orderStatus")

    if status == "Complete":
        props = data.get("properties") or data.get("relatedTitles") or data.get("titleOrders") or []
        if props:
            results = [
                map_property(
                    {**p, "titleReference": p.get("titleReference") or p.get("titleRef") or p.get("description")},
                    "Unknown Address",
                )
                for p in props
            ]
        else:
            # Complete, but the result sits on the root object
            results = [
                AddressResult(
                    id=str(data.get("orderId") or order_id),
                    full_address=data.get("description") or "Verified Property",
                    title_reference=data.get("titleReference") or "Verified",
                    lot_plan="",
                )
            ]
        return SearchStatusResponse(order_id=order_id, status="complete", results=results)

    if status == "Error":
        reason = data.get("failureReason") or data.get("displayStatus") or "Order Failed"
        return SearchStatusResponse(order_id=order_id, status="failed", reason=reason)

    return SearchStatusResponse(order_id=order_id, status="pending")
