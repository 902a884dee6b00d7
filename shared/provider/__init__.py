from .client import ProviderClient, ProviderDownload, get_provider_client
from .errors import ProviderError, ProviderUnavailable

__all__ = [
    "ProviderClient",
    "ProviderDownload",
    "get_provider_client",
    "ProviderError",
    "ProviderUnavailable"
]
