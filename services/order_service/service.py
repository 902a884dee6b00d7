from datetime import datetime, timezone
from typing import List

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config import settings
from shared.provider import ProviderClient
from .documents import document_filename, generate_mock_document
from .models import Order, OrderItem
from .repository import OrderRepository

logger = structlog.get_logger(__name__)


class ItemNotReadyError(Exception):
    pass


class DocumentDownload:
    def __init__(self, content: bytes, media_type: str, disposition: str):
        self.content = content
        self.media_type = media_type
        self.disposition = disposition


class OrderService:
    @staticmethod
    async def create_order(db: AsyncSession, order_id: str, session_id: str, items: List[dict]):
        """Persists a new order from cart items (as returned by the cart service)."""
        order = Order(
            id=order_id,
            session_id=session_id,
            created_at=datetime.now(timezone.utc),
            total=round(sum(item["document"]["price"] for item in items), 2),
            status="processing",
            items=[
                OrderItem(
                    property_id=item["property_id"],
                    address=item["address"],
                    street=item.get("street") or "",
                    suburb=item.get("suburb") or "",
                    state=item.get("state") or "",
                    postcode=item.get("postcode") or "",
                    title_reference=item.get("title_reference"),
                    lot_plan=item.get("lot_plan"),
                    document_id=item["document"]["id"],
                    document_type=item["document"]["type"],
                    description=item["document"].get("description", ""),
                    price=item["document"]["price"],
                    status="processing"
                )
                for item in items
            ]
        )
        order = await OrderRepository.create_order(db, order)
        logger.info("order_created", order_id=order.id, items=len(items), total=order.total)
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str):
        return await OrderRepository.get_order(db, order_id)

    @staticmethod
    async def list_orders(db: AsyncSession, session_id: str):
        return await OrderRepository.list_orders(db, session_id)

    @staticmethod
    async def download_document(provider: ProviderClient, order: Order, item: OrderItem) -> DocumentDownload:
        """Raises ItemNotReadyError while the item is processing; provider errors propagate."""
        if item.status != "ready":
            raise ItemNotReadyError(f"{item.document_type} for order {order.id} is still processing")

        if settings.USE_MOCK_API:
            content = generate_mock_document(item.document_type, item.address, order.id, item.title_reference)
            filename = document_filename(item.document_type, item.address)
            return DocumentDownload(
                content=content.encode("utf-8"),
                media_type="text/plain; charset=utf-8",
                disposition=f'attachment; filename="{filename}"'
            )

        download = await provider.download(order.id)
        return DocumentDownload(
            content=download.content,
            media_type=download.content_type or "application/octet-stream",
            disposition=download.content_disposition or f'attachment; filename="document-{order.id}.pdf"'
        )
