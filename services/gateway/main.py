from typing import Optional

import httpx
from fastapi import FastAPI, Request, status

from shared.api import register_exception_handlers
from shared.api.handlers import error_response
from shared.config.settings import Settings, get_settings
from shared.observability import setup_observability

from .proxy import ServiceUnavailable, UpstreamProxy
from .router import router, public_router


def create_gateway_app(
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
    observability: bool = True,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Bookstore API Gateway",
        version="1.0.0",
        description="API Gateway for the Bookstore services",
    )

    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=settings.gateway_timeout_seconds)
    app.state.proxy = UpstreamProxy(settings.upstreams, client, api_prefix=settings.api_prefix)

    # --- OBSERVABILITY BOOTSTRAP ---
    if observability:
        setup_observability(app, "api_gateway", settings)

    register_exception_handlers(app)

    @app.exception_handler(ServiceUnavailable)
    async def service_unavailable_handler(request: Request, exc: ServiceUnavailable):
        return error_response(str(exc), status.HTTP_503_SERVICE_UNAVAILABLE)

    app.include_router(public_router)
    app.include_router(router, prefix=settings.api_prefix)

    @app.on_event("shutdown")
    async def shutdown_event():
        if owns_client:
            await client.aclose()

    return app


app = create_gateway_app()
