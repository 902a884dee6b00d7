from pydantic import BaseModel
from .catalog import DocumentType


class PropertyDocument(BaseModel):
    id: str
    type: DocumentType
    description: str
    price: float
    available: bool = True

    class Config:
        frozen = True
