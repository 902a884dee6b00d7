"""Placeholder documents served for downloads in mock mode."""
import random
import re
from datetime import datetime

from services.search_service.address_parser import normalize_address

TITLE_ALERT_MARKER = "SP724538"
PRESTONS_TITLE = "2331/1092549"
_TITLE_REF_RE = re.compile(r"\d+/+[A-Z]+\d+")


def document_filename(doc_type: str, address: str) -> str:
    street_part = address.split(",")[0]
    name = f"{doc_type}-{street_part}"
    return re.sub(r"[^\w.-]+", "_", name) + ".txt"


def generate_mock_document(doc_type: str, address: str, order_id: str, title_reference: str = "") -> str:
    now = datetime.now()
    date = now.strftime("%d/%m/%Y")
    time = now.strftime("%H:%M:%S")

    references = f"{address} {title_reference or ''}"
    is_title_alert = TITLE_ALERT_MARKER in references
    is_prestons = "prestons" in normalize_address(address) or PRESTONS_TITLE in references

    lot_plan = f"Lot 1 in Deposited Plan {random.randint(0, 899999)}"
    owner = "JOHN DOE & JANE DOE"
    unregistered_dealings = "NIL"
    lga = "SYDNEY"
    parish = "ALEXANDRIA"

    if _TITLE_REF_RE.search(address):
        lot_plan = address

    if is_prestons:
        lot_plan = "Lot 2331 in Deposited Plan 1092549"
        owner = "MICHAEL SMITH & SARAH SMITH"
        lga = "LIVERPOOL"
        parish = "MINTO"

    if is_title_alert:
        owner = "ROBERT SMITH"
        unregistered_dealings = "AH123456  CAVEAT  (DATED 14/12/2025)"

    if "Title Search" in doc_type:
        caveat = "3. AM12345  CAVEAT BY INTERESTED PARTY" if is_title_alert else ""
        return f"""LAND REGISTRY SERVICES - TITLE SEARCH
--------------------------------------------------
Search Date: {date}
Time: {time}
Reference: {order_id}

LAND DESCRIPTION
----------------
{lot_plan}
Property Address: {address}
LGA: {lga}
Parish: {parish}  County: CUMBERLAND

FIRST SCHEDULE
--------------
{owner}
AS JOINT TENANTS

SECOND SCHEDULE (NOTIFICATIONS)
---------------
1. RESERVATIONS AND CONDITIONS IN THE CROWN GRANT(S)
2. MORTGAGE TO COMMONWEALTH BANK OF AUSTRALIA
{caveat}

UNREGISTERED DEALINGS: {unregistered_dealings}

*** END OF SEARCH ***
(Printed via TitleFlow System)"""

    if "Plan" in doc_type:
        plan_number = lot_plan.split("Plan ")[-1] if "Deposited Plan" in lot_plan else "876543"
        lot = "2331" if is_prestons else "1"
        area = "650.0" if is_prestons else "500.0"
        return f"""[OFFICIAL PLAN IMAGE PLACEHOLDER]

DEPOSITED PLAN: {plan_number}
---------------------
Plan of Subdivision
Address: {address}
LGA: {lga}

[ ASCII DIAGRAM ]
__________________________
|                        |
|        LOT {lot:<12}|
|      {area} m2          |
|                        |
|________________________|
      ROAD WIDENING
      (15m WIDE)

Surveyor: B. BUILDER
Registered: 12/03/1995"""

    return f"""OFFICIAL DOCUMENT: {doc_type.upper()}
Property: {address}
Order ID: {order_id}
Date: {date}

This certifies the details requested for the above property have been searched against the official register.

Status: CLEAR
Encumbrances: NONE LISTED
Caveats: NIL

Certified correct for the purposes of the Real Property Act.
Registrar General."""
