from typing import List, Literal, Optional
from pydantic import BaseModel


class AddressResult(BaseModel):
    id: str
    full_address: str
    street: str = ""
    suburb: str = ""
    state: str = ""
    postcode: str = ""
    lot_plan: Optional[str] = None
    title_reference: Optional[str] = None

    class Config:
        frozen = True


class SearchResponse(BaseModel):
    query: str
    results: List[AddressResult] = []
    pending_order_id: Optional[str] = None


class SearchStatusResponse(BaseModel):
    order_id: str
    status: Literal["pending", "complete", "failed"]
    results: List[AddressResult] = []
    reason: Optional[str] = None


class SearchScenario(BaseModel):
    label: str
    query: str
    description: str
