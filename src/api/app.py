import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.api.error import ClientError, client_error_handler, redirect_handler
from src.api.routes import auth, invoices
from src.app.services.navigator import RedirectSignal
from src.depends import init_db, dispose_engine

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.CREATE_TABLES_ON_STARTUP:
            await init_db()
        yield
        await dispose_engine()

    app = FastAPI(
        title="Invoice Dashboard API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RedirectSignal, redirect_handler)

    app.include_router(invoices.router, prefix=config.API_PREFIX)
    app.include_router(auth.router, prefix=config.API_PREFIX)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app
