"""
Credential injection for the title-search provider.

Every provider call (search, status, order, download) goes through
``provider_headers`` so the header name and scheme are defined once.
"""
from shared.config import settings

AUTH_HEADER = "Authorization"


def provider_headers(json_body: bool = True) -> dict:
    headers = {}
    if settings.PROVIDER_API_KEY:
        headers[AUTH_HEADER] = f"{settings.PROVIDER_AUTH_SCHEME} {settings.PROVIDER_API_KEY}"
    if json_body:
        headers["Content-Type"] = "application/json"
    return headers


def redacted(headers: dict) -> dict:
    """Copy of ``headers`` safe to log: only the first characters of the credential survive."""
    safe = dict(headers)
    value = safe.get(AUTH_HEADER)
    if value:
        scheme, _, credential = value.partition(" ")
        safe[AUTH_HEADER] = f"{scheme} {credential[:6]}..."
    return safe
