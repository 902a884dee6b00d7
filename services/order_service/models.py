from datetime import timezone

from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from shared.config.database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(String, primary_key=True, index=True) # provider order id or ORD-nnnnnn
    session_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    total = Column(Float, nullable=False) # calculated at creation
    status = Column(String, default="processing") # processing, completed, failed

    items = relationship(
        "OrderItem", back_populates="order", lazy="selectin",
        cascade="all, delete-orphan", order_by="OrderItem.id"
    )

    @property
    def date(self):
        # SQLite hands DateTime back naive; stored values are always UTC
        if self.created_at is not None and self.created_at.tzinfo is None:
            return self.created_at.replace(tzinfo=timezone.utc)
        return self.created_at

class OrderNumber(Base):
    """Sequence for local order ids (ORD-000001, ...). One row per id handed out."""
    __tablename__ = "order_numbers"

    id = Column(Integer, primary_key=True, autoincrement=True)

class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(String, ForeignKey("orders.id"), index=True)

    property_id = Column(String, nullable=False)
    address = Column(String, nullable=False)
    street = Column(String, default="")
    suburb = Column(String, default="")
    state = Column(String, default="")
    postcode = Column(String, default="")
    title_reference = Column(String, nullable=True)
    lot_plan = Column(String, nullable=True)

    document_id = Column(String, nullable=False)
    document_type = Column(String, nullable=False)
    description = Column(String, default="")
    price = Column(Float, nullable=False)

    status = Column(String, default="processing") # processing, ready

    order = relationship("Order", back_populates="items")

    @property
    def document(self) -> dict:
        return {
            "id": self.document_id,
            "type": self.document_type,
            "description": self.description,
            "price": self.price,
            "available": True,
        }
