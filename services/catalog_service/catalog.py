from enum import Enum


class DocumentType(str, Enum):
    TITLE_SEARCH = "Title Search"
    PLAN_IMAGE = "Deposited Plan / Strata Plan"
    DEALING = "Dealing / Instrument"
    COVENANT = "Covenant"
    STRATA_REPORT = "Strata Inspection Report"


# Prices in AUD. The provider exposes no per-property catalog, so this list is
# offered for every property.
DOCUMENTS = (
    {
        "id": "doc_title",
        "type": DocumentType.TITLE_SEARCH,
        "description": "Current ownership details and encumbrances.",
        "price": 18.50,
        "available": True,
    },
    {
        "id": "doc_plan",
        "type": DocumentType.PLAN_IMAGE,
        "description": "Visual diagram of the lot dimensions and location.",
        "price": 12.95,
        "available": True,
    },
    {
        "id": "doc_covenant",
        "type": DocumentType.COVENANT,
        "description": "Details of restrictions on the use of the land.",
        "price": 25.00,
        "available": True,
    },
    {
        "id": "doc_dealing",
        "type": DocumentType.DEALING,
        "description": "Copy of specific dealing or instrument.",
        "price": 15.40,
        "available": True,
    },
)
