"""
Internal service-to-service key.

A missing INTERNAL_API_KEY must not crash startup (local runs and tests have
no .env), so an insecure default is used with a loud warning instead.
"""
import os
import secrets
import warnings

from shared.config import settings  # noqa: F401  loads .env before the key is read

_INTERNAL_API_KEY: str = os.getenv("INTERNAL_API_KEY", "")

if not _INTERNAL_API_KEY:
    warnings.warn(
        "INTERNAL_API_KEY is not set. Using an insecure default. "
        "Set this env var in production!",
        stacklevel=2,
    )
    _INTERNAL_API_KEY = "insecure-default-change-me"

INTERNAL_API_KEY: str = _INTERNAL_API_KEY


def internal_headers() -> dict:
    """Headers every internal call between cluster services must carry."""
    return {"X-Internal-API-Key": INTERNAL_API_KEY}


def verify_api_key(provided_key: str) -> bool:
    """Verify an API key using constant-time comparison to prevent timing attacks."""
    if not provided_key:
        return False
    return secrets.compare_digest(str(provided_key), str(INTERNAL_API_KEY))
