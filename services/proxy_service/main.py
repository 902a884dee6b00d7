from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from shared.security import limiter
from .router import router

proxy_app = FastAPI(title="Provider Proxy", version="1.0.0")

# --- SECURITY SETUP ---
proxy_app.state.limiter = limiter
proxy_app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

proxy_app.include_router(router)
