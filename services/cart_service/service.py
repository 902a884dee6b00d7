import uuid
import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from services.catalog_service.service import CatalogService
from .models import Cart, CartItem
from .repository import CartRepository
from .schemas import CartItemCreate

logger = structlog.get_logger(__name__)

class CartService:
    @staticmethod
    async def create_cart(db: AsyncSession):
        cart = Cart(session_id=str(uuid.uuid4()))
        return await CartRepository.create_cart(db, cart)

    @staticmethod
    async def get_cart(db: AsyncSession, session_id: str):
        return await CartRepository.get_cart(db, session_id)

    @staticmethod
    async def add_item(db: AsyncSession, session_id: str, data: CartItemCreate):
        # Raises DocumentNotFoundError; price always comes from the catalog
        document = CatalogService.get_document(data.document_id)
        prop = data.property

        existing = await CartRepository.find_item(db, session_id, prop.id, document.id)
        if existing:
            logger.info("cart_item_duplicate", session_id=session_id, property_id=prop.id, document_id=document.id)
            return await CartRepository.get_cart(db, session_id)

        item = CartItem(
            session_id=session_id,
            property_id=prop.id,
            address=prop.full_address,
            street=prop.street,
            suburb=prop.suburb,
            state=prop.state,
            postcode=prop.postcode,
            title_reference=prop.title_reference,
            lot_plan=prop.lot_plan,
            document_id=document.id,
            document_type=document.type.value,
            description=document.description,
            price=document.price
        )
        await CartRepository.add_item(db, item)
        logger.info("cart_item_added", session_id=session_id, property_id=prop.id, document_id=document.id)
        return await CartRepository.get_cart(db, session_id)

    @staticmethod
    async def remove_item(db: AsyncSession, session_id: str, property_id: str, document_id: str):
        await CartRepository.remove_item(db, session_id, property_id, document_id)
        return await CartRepository.get_cart(db, session_id)

    @staticmethod
    async def clear_cart(db: AsyncSession, session_id: str):
        await CartRepository.clear_cart(db, session_id)
