# Canned properties served when USE_MOCK_API is on. The "test_*" entries follow
# the provider's staging test-data patterns.
MOCK_ADDRESSES = [
    {
        "id": "prop_001",
        "full_address": "42 Wallaby Way, Sydney NSW 2000",
        "street": "42 Wallaby Way",
        "suburb": "Sydney",
        "state": "NSW",
        "postcode": "2000",
        "lot_plan": "12//DP876543",
        "title_reference": "12/DP876543",
    },
    {
        "id": "prop_002",
        "full_address": "10 Downing Street, Melbourne VIC 3000",
        "street": "10 Downing Street",
        "suburb": "Melbourne",
        "state": "VIC",
        "postcode": "3000",
        "lot_plan": "1//PS123456",
        "title_reference": "1/PS123456",
    },
    {
        "id": "test_nsw_01",
        "full_address": "1 Test Street, Sydney NSW 2000",
        "street": "1 Test Street",
        "suburb": "Sydney",
        "state": "NSW",
        "postcode": "2000",
        "lot_plan": "1//DP111111",
        "title_reference": "1/DP111111",
    },
    {
        "id": "test_vic_01",
        "full_address": "100 Test Road, Melbourne VIC 3000",
        "street": "100 Test Road",
        "suburb": "Melbourne",
        "state": "VIC",
        "postcode": "3000",
        "lot_plan": "1//PS123456",
        "title_reference": "1/PS123456",
    },
    {
        "id": "test_qld_01",
        "full_address": "2 Test Street, Brisbane QLD 4000",
        "street": "2 Test Street",
        "suburb": "Brisbane",
        "state": "QLD",
        "postcode": "4000",
        "lot_plan": "2//SP222222",
        "title_reference": "2/SP222222",
    },
    {
        "id": "test_alert_01",
        "full_address": "Lot 2 in Strata Plan 724538",
        "street": "2/SP724538",
        "suburb": "Bondi",
        "state": "NSW",
        "postcode": "2026",
        "lot_plan": "2//SP724538",
        "title_reference": "2/SP724538",
    },
    {
        "id": "prop_test_001",
        "full_address": "Unit 6, 32 Clifford St, Torrensville 5031",
        "street": "Unit 6, 32 Clifford St",
        "suburb": "Torrensville",
        "state": "SA",
        "postcode": "5031",
        "lot_plan": "6//SP12345",
        "title_reference": "CT 6000/100",
    },
    {
        "id": "prop_prestons_01",
        "full_address": "90 Dalmeny Drive, Prestons NSW 2170",
        "street": "90 Dalmeny Drive",
        "suburb": "Prestons",
        "state": "NSW",
        "postcode": "2170",
        "lot_plan": "2331//DP1092549",
        "title_reference": "2331/1092549",
    },
]

# Returned by the status poll in mock mode
MOCK_COMPLETED_SEARCH = {
    "id": "mock_complete",
    "full_address": "49-51 Good Street, Westmead 2145",
    "street": "49-51 Good Street",
    "suburb": "Westmead",
    "state": "NSW",
    "postcode": "2145",
    "lot_plan": "Lot 1 DP123456",
    "title_reference": "1/SP123456",
}

TEST_SCENARIOS = [
    {"label": "NSW Address", "query": "1 Test Street, Sydney NSW 2000", "description": "Standard NSW Search"},
    {"label": "VIC Title", "query": "1/PS123456", "description": "Search by Title Reference"},
    {"label": "QLD Address", "query": "2 Test Street, Brisbane QLD 4000", "description": "Standard QLD Search"},
    {"label": "Title Alert Test", "query": "2/SP724538", "description": "Specific Test for Title Alerts Workflow"},
    {"label": "Prestons Test", "query": "90 Dalmeny Drive, Prestons NSW 2170", "description": "User Specific Test Case"},
]
