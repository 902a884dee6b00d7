"""
Best-effort address parsing for free-text search queries.

The provider wants ``streetAddress``, ``suburb`` and ``postcode`` in the body
and ``state`` as a query parameter. Users type anything from
``"90 Dalmeny Drive, Prestons NSW 2170"`` to ``"Unit 1 49-51 Good Street Westmead"``,
so parsing never fails: the fallback is "whole string as street".
"""
import re
from typing import NamedTuple

STATES = ("NSW", "VIC", "QLD", "WA", "SA", "TAS", "ACT", "NT")
DEFAULT_STATE = "NSW"

# ... <STATE> <DDDD> at the very end of the query
_LOCATION_RE = re.compile(r"\s+(" + "|".join(STATES) + r")\s+(\d{4})$", re.IGNORECASE)

_ABBREVIATIONS = (
    ("street", "st"),
    ("drive", "dr"),
    ("road", "rd"),
    ("avenue", "ave"),
    ("place", "pl"),
)


class ParsedAddress(NamedTuple):
    street: str
    suburb: str
    state: str
    postcode: str

    def formatted(self) -> str:
        """Render back to the canonical ``Street, Suburb STATE POSTCODE`` shape."""
        head = f"{self.street}, {self.suburb}" if self.suburb else self.street
        tail = " ".join(p for p in (self.state, self.postcode) if p)
        return f"{head} {tail}".strip()


def _comma_pair(text: str):
    # Empty positions are kept: ", Westmead" has an empty street
    segments = [s.strip() for s in text.split(",")]
    return segments[0], segments[1]


def _split_street_suburb(remainder: str):
    if "," in remainder:
        # Street is the first segment and suburb the second; anything after is ignored
        return _comma_pair(remainder)

    # No comma: assume the last word is the suburb ("... Good Street Westmead")
    head, sep, last = remainder.rpartition(" ")
    if sep:
        return head.strip(), last
    return remainder, ""


def parse_address(query: str) -> ParsedAddress:
    clean = (query or "").strip()
    match = _LOCATION_RE.search(clean)

    if match:
        state = match.group(1).upper()
        postcode = match.group(2)
        remainder = clean[:match.start()].strip()
        street, suburb = _split_street_suburb(remainder)
        return ParsedAddress(street, suburb, state, postcode)

    if "," in clean:
        street, suburb = _comma_pair(clean)
        return ParsedAddress(street, suburb, DEFAULT_STATE, "")
    return ParsedAddress(clean, "", DEFAULT_STATE, "")


def to_provider_request(parsed: ParsedAddress):
    """Returns ``(state, body)`` for the provider's address search."""
    body = {
        "streetAddress": parsed.street,
        "suburb": parsed.suburb,
        "postcode": parsed.postcode,
    }
    return parsed.state, body


def normalize_address(text: str) -> str:
    """Lower-case, comma-free, abbreviated form used for fuzzy matching."""
    normalized = (text or "").lower().replace(",", "")
    for long_form, short_form in _ABBREVIATIONS:
        normalized = re.sub(rf"\s+{long_form}\b", f" {short_form}", normalized)
    return re.sub(r"\s+", " ", normalized).strip()
