from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel
from services.catalog_service.schemas import PropertyDocument

class CheckoutRequest(BaseModel):
    session_id: str

class OrderItemResponse(BaseModel):
    id: int
    property_id: str
    address: str
    street: str = ""
    suburb: str = ""
    state: str = ""
    postcode: str = ""
    title_reference: Optional[str] = None
    lot_plan: Optional[str] = None
    document: PropertyDocument
    status: Literal["processing", "ready"]

    class Config:
        from_attributes = True

class OrderResponse(BaseModel):
    id: str
    session_id: str
    date: datetime
    items: List[OrderItemResponse] = []
    total: float
    status: Literal["processing", "completed", "failed"]

    class Config:
        from_attributes = True
