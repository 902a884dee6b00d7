from fastapi import FastAPI
from .models import Cart, CartItem  # noqa: F401  registers models with SQLAlchemy Base
from .router import router, internal_router, public_router

cart_app = FastAPI(title="Cart Service", version="1.0.0")

cart_app.include_router(public_router)
cart_app.include_router(internal_router)
cart_app.include_router(router)
