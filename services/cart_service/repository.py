from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from .models import Cart, CartItem

class CartRepository:
    @staticmethod
    async def create_cart(db: AsyncSession, cart: Cart):
        db.add(cart)
        await db.commit()
        return await CartRepository.get_cart(db, cart.session_id)

    @staticmethod
    async def get_cart(db: AsyncSession, session_id: str):
        # populate_existing: items may have changed since the cart was first loaded in this session
        result = await db.execute(
            select(Cart)
            .where(Cart.session_id == session_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    @staticmethod
    async def find_item(db: AsyncSession, session_id: str, property_id: str, document_id: str):
        result = await db.execute(
            select(CartItem)
            .where(CartItem.session_id == session_id)
            .where(CartItem.property_id == property_id)
            .where(CartItem.document_id == document_id)
        )
        return result.scalars().first()

    @staticmethod
    async def add_item(db: AsyncSession, item: CartItem):
        db.add(item)
        await db.commit()
        return item

    @staticmethod
    async def remove_item(db: AsyncSession, session_id: str, property_id: str, document_id: str):
        stmt = delete(CartItem).where(
            CartItem.session_id == session_id,
            CartItem.property_id == property_id,
            CartItem.document_id == document_id
        )
        await db.execute(stmt)
        await db.commit()

    @staticmethod
    async def clear_cart(db: AsyncSession, session_id: str):
        """Deletes all items for the session and forces a commit."""
        stmt = delete(CartItem).where(CartItem.session_id == session_id)
        await db.execute(stmt)
        await db.commit()
