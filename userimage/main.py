from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles

from userimage.api.errors import register_api_exception_handlers
from userimage.api.router import router as api_router
from userimage.db.session import check_database, close_engine
from userimage.http.middleware import (
    CorsHeadersMiddleware,
    RequestLoggingMiddleware,
    parse_skip_paths,
)
from userimage.logging_config import configure_logging, parse_redact_fields
from userimage.logging_utils import structured_log
from userimage.services.user_images.paths import PUBLIC_IMAGE_PREFIX, public_image_root
from userimage.settings import Settings, settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    app_settings: Settings = application.state.settings
    structured_log(
        logger, "info", "app.started",
        public_dir=str(Path(app_settings.public_dir).resolve()),
        log_format=app_settings.log_format,
        max_upload_bytes=app_settings.profile_image_max_bytes,
    )
    yield
    await close_engine()


def _mount_public_images(application: FastAPI, app_settings: Settings) -> None:
    if not app_settings.serve_public_images:
        return
    image_root = public_image_root(app_settings.public_dir)
    image_root.mkdir(parents=True, exist_ok=True)
    application.mount(
        PUBLIC_IMAGE_PREFIX.rstrip("/"),
        StaticFiles(directory=image_root),
        name="profile-images",
    )


def create_app(app_settings: Settings = settings) -> FastAPI:
    application = FastAPI(title=app_settings.app_name, lifespan=lifespan)
    application.state.settings = app_settings
    register_api_exception_handlers(application)
    application.add_middleware(CorsHeadersMiddleware, headers=app_settings.cors_headers)
    application.add_middleware(
        RequestLoggingMiddleware,
        log_requests=app_settings.log_requests,
        skip_paths=parse_skip_paths(app_settings.log_request_skip_paths),
    )
    application.include_router(api_router)

    @application.get("/healthz")
    async def healthz() -> dict[str, str]:
        if await check_database():
            return {"status": "ok"}
        raise HTTPException(status_code=500, detail="database unavailable")

    _mount_public_images(application, app_settings)
    return application


configure_logging(
    level=settings.log_level,
    log_format=settings.log_format,
    redact_fields=parse_redact_fields(settings.log_redact_fields),
    include_uvicorn_access=settings.log_uvicorn_access,
)

app = create_app()
