from fastapi import FastAPI
from loguru import logger

from core.exceptions import GatewayError
from core.logging_config import setup_logging_from_env
from core.settings import get_settings
from services.api.exception_handlers import gateway_exception_handler, unhandled_exception_handler
from services.api.routes import router as storage_router
from services.api.startup import verify_dependencies


def create_app() -> FastAPI:
    setup_logging_from_env()

    app = FastAPI(
        title="Bucket Gateway API",
        version="0.1.0",
        description="Bucket listing and object downloads behind a dependency compatibility check",
    )

    @app.on_event("startup")
    async def _verify_dependencies() -> None:
        settings = get_settings()
        verify_dependencies(settings)
        logger.info(
            "API initialised with storage backend={backend} bucket={bucket}",
            backend=settings.storage.backend,
            bucket=settings.storage.bucket,
        )

    @app.get("/healthz", tags=["meta"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    app.add_exception_handler(GatewayError, gateway_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(storage_router)

    return app


app = create_app()


__all__ = ["app", "create_app"]
