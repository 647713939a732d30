from typing import Optional

from fastapi import FastAPI

from shared.api import register_exception_handlers
from shared.config.settings import Settings, get_settings
from shared.observability import setup_observability

from .router import router, public_router
from .service import OrderService


def create_order_app(
    settings: Optional[Settings] = None,
    service: Optional[OrderService] = None,
    observability: bool = True,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Orders Service", version="1.0.0")
    app.state.order_service = service or OrderService()

    # --- OBSERVABILITY BOOTSTRAP ---
    if observability:
        setup_observability(app, "orders_service", settings)

    register_exception_handlers(app)
    app.include_router(public_router)
    app.include_router(router, prefix=f"{settings.api_prefix}/orders")

    @app.on_event("startup")
    async def startup_event():
        if settings.seed_sample_data and not len(app.state.order_service.repository):
            app.state.order_service.seed_sample_orders()

    return app


order_app = create_order_app()
