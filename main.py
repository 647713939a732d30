from datetime import datetime, timezone

from fastapi import FastAPI

from shared.api import register_exception_handlers
from shared.config.settings import get_settings
from shared.observability import setup_observability

from services.book_service.router import router as book_router
from services.book_service.service import BookService
from services.order_service.router import router as order_router
from services.order_service.service import OrderService

# Every resource service in one process, for local development.
# In a split deployment run each services.<name>.main app plus the gateway.
settings = get_settings()

app = FastAPI(title="Bookstore Cluster")
app.state.book_service = BookService()
app.state.order_service = OrderService()

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, "bookstore_cluster", settings)
register_exception_handlers(app)

app.include_router(book_router, prefix=f"{settings.api_prefix}/books")
app.include_router(order_router, prefix=f"{settings.api_prefix}/orders")


@app.get("/health")
async def health_check():
    return {
        "success": True,
        "service": "cluster",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.on_event("startup")
async def startup_event():
    if settings.seed_sample_data:
        app.state.book_service.seed_sample_books()
        app.state.order_service.seed_sample_orders()
