from typing import List
from fastapi import APIRouter, HTTPException
from .schemas import PropertyDocument
from .service import CatalogService, DocumentNotFoundError

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "catalog", "status": "running"}


@router.get("/documents", response_model=List[PropertyDocument])
async def list_documents():
    return CatalogService.list_documents()


@router.get("/documents/{document_id}", response_model=PropertyDocument)
async def get_document(document_id: str):
    try:
        return CatalogService.get_document(document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/properties/{property_id}/documents", response_model=List[PropertyDocument])
async def documents_for_property(property_id: str):
    return CatalogService.documents_for_property(property_id)
