from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .models import Order, OrderNumber

class OrderRepository:
    @staticmethod
    async def next_order_number(db: AsyncSession) -> int:
        number = OrderNumber()
        db.add(number)
        await db.commit()
        return number.id

    @staticmethod
    async def create_order(db: AsyncSession, order: Order):
        db.add(order)
        await db.commit()
        return await OrderRepository.get_order(db, order.id)

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str):
        result = await db.execute(
            select(Order)
            .where(Order.id == order_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    @staticmethod
    async def list_orders(db: AsyncSession, session_id: str):
        result = await db.execute(
            select(Order)
            .where(Order.session_id == session_id)
            .order_by(Order.created_at.desc())
        )
        return result.scalars().all()

    @staticmethod
    async def mark_failed(db: AsyncSession, order_id: str):
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            return None

        order.status = "failed"

        await db.commit()
        return order

    @staticmethod
    async def mark_fulfilled(db: AsyncSession, order_id: str):
        """processing -> completed, every item -> ready. Other states are left alone."""
        order = await OrderRepository.get_order(db, order_id)
        if not order or order.status != "processing":
            return order

        order.status = "completed"
        for item in order.items:
            item.status = "ready"

        await db.commit()
        return order
