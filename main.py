from fastapi import FastAPI
from shared.config.database import create_tables
from shared.observability import setup_observability

# IMPORTANT: importing the service apps registers their models with Base
from services.search_service.main import search_app
from services.catalog_service.main import catalog_app
from services.cart_service.main import cart_app
from services.order_service.main import order_app
from services.order_service.fulfilment import fulfilment_scheduler
from services.proxy_service.main import proxy_app
from services.assistant_service.main import assistant_app

app = FastAPI(title="TitleFlow Cluster")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, "titleflow")

@app.on_event("startup")
async def startup_event():
    await create_tables()

@app.on_event("shutdown")
async def shutdown_event():
    await fulfilment_scheduler.shutdown()

@app.get("/health")
async def health_check():
    return {"service": "titleflow", "status": "running"}

app.mount("/search", search_app)
app.mount("/catalog", catalog_app)
app.mount("/carts", cart_app)
app.mount("/orders", order_app)
app.mount("/api", proxy_app)
app.mount("/assistant", assistant_app)
