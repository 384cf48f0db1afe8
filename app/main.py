from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.database import Store, init_db
from app.core.handlers import add_error_handlers
from app.core.logging import logger
from app.api.router import api_router
from app.services.entities import build_gateways


def create_app(store: Optional[Store] = None) -> FastAPI:
    """
    Build the application around a store client.

    Tables are created (and courses seeded) when the app starts, and the
    pool is disposed when it stops.
    """
    store = store or Store.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await run_in_threadpool(init_db, store)
        yield
        store.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.gateways = build_gateways(store, settings.MAX_ID_ATTEMPTS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    add_error_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    def health_check():
        """
        Health check endpoint
        """
        return {
            "status": "ok",
            "message": f"{settings.PROJECT_NAME} is running",
            "version": settings.APP_VERSION
        }

    # Mounted last so it never shadows the API routes
    if settings.FRONTEND_DIR:
        app.mount("/", StaticFiles(directory=settings.FRONTEND_DIR, html=True), name="frontend")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
