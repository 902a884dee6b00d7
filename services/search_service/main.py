from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from shared.security import limiter
from .router import router, public_router

search_app = FastAPI(title="Search Service", version="1.0.0")

# --- SECURITY SETUP ---
search_app.state.limiter = limiter
search_app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

search_app.include_router(public_router)
search_app.include_router(router)
