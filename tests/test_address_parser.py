import pytest

from services.search_service.address_parser import (
    ParsedAddress,
    normalize_address,
    parse_address,
    to_provider_request,
)


def test_street_suburb_state_postcode():
    parsed = parse_address("90 Dalmeny Drive, Prestons NSW 2170")
    assert parsed == ParsedAddress("90 Dalmeny Drive", "Prestons", "NSW", "2170")


def test_state_is_case_insensitive_and_upper_cased():
    parsed = parse_address("2 Test Street, Brisbane qld 4000")
    assert parsed.state == "QLD"
    assert parsed.postcode == "4000"


def test_without_comma_last_word_is_suburb():
    parsed = parse_address("Unit 1 49-51 Good Street Westmead NSW 2145")
    assert parsed.street == "Unit 1 49-51 Good Street"
    assert parsed.suburb == "Westmead"
    assert parsed.state == "NSW"
    assert parsed.postcode == "2145"


def test_single_word_remainder_is_all_street():
    parsed = parse_address("Westmead NSW 2145")
    assert parsed == ParsedAddress("Westmead", "", "NSW", "2145")


def test_comma_split_takes_first_two_segments():
    parsed = parse_address("Unit 6, 32 Clifford St, Torrensville SA 5031")
    assert parsed.street == "Unit 6"
    assert parsed.suburb == "32 Clifford St"
    assert parsed.state == "SA"
    assert parsed.postcode == "5031"


def test_leading_comma_keeps_empty_street():
    parsed = parse_address(", Westmead NSW 2145")
    assert parsed == ParsedAddress("", "Westmead", "NSW", "2145")


def test_trailing_comma_keeps_empty_suburb():
    assert parse_address("42 Wallaby Way, NSW 2000") == ParsedAddress("42 Wallaby Way", "", "NSW", "2000")
    assert parse_address("42 Wallaby Way,") == ParsedAddress("42 Wallaby Way", "", "NSW", "")


def test_comma_split_without_state_defaults_to_nsw():
    parsed = parse_address("42 Wallaby Way, Sydney")
    assert parsed == ParsedAddress("42 Wallaby Way", "Sydney", "NSW", "")


def test_unparseable_query_falls_back_to_whole_string_as_street():
    parsed = parse_address("  2/SP724538 ")
    assert parsed == ParsedAddress("2/SP724538", "", "NSW", "")


def test_unknown_state_is_not_treated_as_location():
    parsed = parse_address("1 Test Street Sydney XYZ 2000")
    assert parsed.state == "NSW"
    assert parsed.postcode == ""
    assert parsed.street == "1 Test Street Sydney XYZ 2000"


def test_empty_query():
    assert parse_address("") == ParsedAddress("", "", "NSW", "")
    assert parse_address(None) == ParsedAddress("", "", "NSW", "")


@pytest.mark.parametrize("query", [
    "1 Test Street, Sydney NSW 2000",
    "90 Dalmeny Drive, Prestons NSW 2170",
    "10 Downing Street, Melbourne VIC 3000",
    "5 Long Road, North Hobart TAS 7000",
])
def test_parse_is_idempotent_on_well_formed_addresses(query):
    parsed = parse_address(query)
    assert parsed.formatted() == query
    assert parse_address(parsed.formatted()) == parsed


def test_provider_request_shape():
    state, body = to_provider_request(parse_address("1 Test Street, Sydney NSW 2000"))
    assert state == "NSW"
    assert body == {"streetAddress": "1 Test Street", "suburb": "Sydney", "postcode": "2000"}


def test_normalize_address_abbreviates_and_strips_commas():
    assert normalize_address("90 Dalmeny Drive,  Prestons NSW 2170") == "90 dalmeny dr prestons nsw 2170"
    assert normalize_address("1 Test Street") == "1 test st"
    assert normalize_address("3 Long Avenue, 4 Short Place") == "3 long ave 4 short pl"
    assert normalize_address("100 Test Road") == "100 test rd"


def test_normalize_leaves_words_that_only_start_with_a_street_type():
    assert normalize_address("9 Roadside Lane") == "9 roadside lane"
