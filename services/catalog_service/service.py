from typing import List
from .catalog import DOCUMENTS
from .schemas import PropertyDocument


class DocumentNotFoundError(LookupError):
    pass


class CatalogService:

    @staticmethod
    def list_documents() -> List[PropertyDocument]:
        return [PropertyDocument(**doc) for doc in DOCUMENTS]

    @staticmethod
    def documents_for_property(property_id: str) -> List[PropertyDocument]:
        # Every catalogued document can be ordered for any property
        return [PropertyDocument(**{**doc, "available": True}) for doc in DOCUMENTS]

    @staticmethod
    def get_document(document_id: str) -> PropertyDocument:
        for doc in DOCUMENTS:
            if doc["id"] == document_id:
                return PropertyDocument(**doc)
        raise DocumentNotFoundError(f"Document {document_id} not found")
