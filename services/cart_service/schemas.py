from pydantic import BaseModel
from typing import List, Optional
from services.catalog_service.schemas import PropertyDocument
from services.search_service.schemas import AddressResult

class CartItemCreate(BaseModel):
    property: AddressResult
    document_id: str

class CartItemResponse(BaseModel):
    property_id: str
    address: str
    street: str = ""
    suburb: str = ""
    state: str = ""
    postcode: str = ""
    title_reference: Optional[str] = None
    lot_plan: Optional[str] = None
    document: PropertyDocument

    class Config:
        from_attributes = True

class CartResponse(BaseModel):
    session_id: str
    items: List[CartItemResponse] = []
    total: float = 0.0

    class Config:
        from_attributes = True
