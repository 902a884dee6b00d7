from fastapi import FastAPI
from .models import Order, OrderItem, OrderNumber  # noqa: F401  registers models with SQLAlchemy Base
from .router import router, public_router

order_app = FastAPI(title="Order Service", version="1.0.0")

order_app.include_router(public_router)
order_app.include_router(router)
