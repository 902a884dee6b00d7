from services.order_service.documents import document_filename, generate_mock_document


def test_filename_uses_street_part_and_is_sanitised():
    assert document_filename("Title Search", "1 Test Street, Sydney NSW 2000") == "Title_Search-1_Test_Street.txt"
    assert "/" not in document_filename("Plan Image", "Lot 1/DP2 Road, X")


def test_title_search_document():
    text = generate_mock_document("Title Search", "1 Test Street, Sydney NSW 2000", "ORD-000001")
    assert text.startswith("LAND REGISTRY SERVICES - TITLE SEARCH")
    assert "Reference: ORD-000001" in text
    assert "JOHN DOE & JANE DOE" in text
    assert "UNREGISTERED DEALINGS: NIL" in text


def test_title_alert_via_title_reference():
    text = generate_mock_document("Title Search", "3 Alert Road, Sydney NSW 2000", "ORD-1", "1/SP724538")
    assert "ROBERT SMITH" in text
    assert "CAVEAT BY INTERESTED PARTY" in text


def test_prestons_property_details():
    text = generate_mock_document("Plan Image", "2331 Camden Valley Way, Prestons NSW 2170", "ORD-2")
    assert "DEPOSITED PLAN: 1092549" in text
    assert "LGA: LIVERPOOL" in text
    assert "LOT 2331" in text


def test_generic_certificate():
    text = generate_mock_document("Property Certificate", "1 Test Street, Sydney NSW 2000", "ORD-3")
    assert text.startswith("OFFICIAL DOCUMENT: PROPERTY CERTIFICATE")
    assert "Status: CLEAR" in text
