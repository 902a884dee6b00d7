from fastapi import FastAPI
from .router import router, public_router

catalog_app = FastAPI(title="Catalog Service", version="1.0.0")

catalog_app.include_router(public_router)
catalog_app.include_router(router)
