from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.config.database import Base

class Cart(Base):
    __tablename__ = "carts"

    session_id = Column(String, primary_key=True, index=True) # UUID string
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationship to items
    items = relationship(
        "CartItem", back_populates="cart", lazy="selectin",
        cascade="all, delete-orphan", order_by="CartItem.id"
    )

    @property
    def total(self) -> float:
        return round(sum(item.price for item in self.items), 2)

class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(String, ForeignKey("carts.session_id"), index=True)

    # Property, denormalised from the search result it was picked from
    property_id = Column(String, nullable=False)
    address = Column(String, nullable=False)
    street = Column(String, default="")
    suburb = Column(String, default="")
    state = Column(String, default="")
    postcode = Column(String, default="")
    title_reference = Column(String, nullable=True)
    lot_plan = Column(String, nullable=True)

    # Document snapshot taken from the catalog at add time
    document_id = Column(String, nullable=False)
    document_type = Column(String, nullable=False)
    description = Column(String, default="")
    price = Column(Float, nullable=False)

    cart = relationship("Cart", back_populates="items")

    @property
    def document(self) -> dict:
        return {
            "id": self.document_id,
            "type": self.document_type,
            "description": self.description,
            "price": self.price,
            "available": True,
        }
