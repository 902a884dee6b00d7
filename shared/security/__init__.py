from .api_key import verify_api_key, internal_headers
from .dependencies import verify_internal_api_key
from .provider_auth import provider_headers, redacted
from .rate_limiter import limiter, client_ip

__all__ = [
    "verify_api_key",
    "internal_headers",
    "verify_internal_api_key",
    "provider_headers",
    "redacted",
    "limiter",
    "client_ip"
]
