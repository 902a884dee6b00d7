import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./titleflow.db")
DB_ECHO = _flag("DB_ECHO", False)

# Title-search provider
# PROD HOST: https://search.infotrack.com.au
PROVIDER_HOST = os.getenv("PROVIDER_HOST", "https://stagesearch.infotrack.com.au")
PROVIDER_TITLES_PATH = os.getenv("PROVIDER_TITLES_PATH", "/service/au-api/v3/api/national/titles/address")
PROVIDER_ENQUIRY_PATH = os.getenv("PROVIDER_ENQUIRY_PATH", "/services/customer-propertyenquiry/v1")
PROVIDER_API_KEY = os.getenv("PROVIDER_API_KEY", "")
PROVIDER_AUTH_SCHEME = os.getenv("PROVIDER_AUTH_SCHEME", "Bearer")
PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "15.0"))

# Without a provider key there is nothing to talk to, so mock data is the default
USE_MOCK_API = _flag("USE_MOCK_API", not PROVIDER_API_KEY)

# Orders
FULFILMENT_DELAY_SECONDS = float(os.getenv("FULFILMENT_DELAY_SECONDS", "5"))
CART_URL = os.getenv("CART_URL", "http://localhost:8000/carts")

# Assistant
ASSISTANT_MODEL = os.getenv("ASSISTANT_MODEL", "gpt-4o-mini")

# Observability
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT", "")
