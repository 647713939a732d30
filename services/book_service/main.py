from typing import Optional

from fastapi import FastAPI

from shared.api import register_exception_handlers
from shared.config.settings import Settings, get_settings
from shared.observability import setup_observability

from .router import router, public_router
from .service import BookService


def create_book_app(
    settings: Optional[Settings] = None,
    service: Optional[BookService] = None,
    observability: bool = True,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Books Service", version="1.0.0")
    app.state.book_service = service or BookService()

    # --- OBSERVABILITY BOOTSTRAP ---
    if observability:
        setup_observability(app, "books_service", settings)

    register_exception_handlers(app)
    app.include_router(public_router)
    app.include_router(router, prefix=f"{settings.api_prefix}/books")

    @app.on_event("startup")
    async def startup_event():
        if settings.seed_sample_data and not len(app.state.book_service.repository):
            app.state.book_service.seed_sample_books()

    return app


book_app = create_book_app()
