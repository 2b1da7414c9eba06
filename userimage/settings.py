from dataclasses import dataclass
import os

DEFAULT_CORS_ALLOW_METHODS = "GET, POST, PUT, PATCH, DELETE, OPTIONS"
DEFAULT_CORS_ALLOW_HEADERS = "Content-Type, Authorization"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    return int(value)


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip() or default


@dataclass(frozen=True)
class Settings:
    app_name: str = os.getenv("APP_NAME", "userimage")
    database_url: str = os.getenv(
        "DATABASE_URL",
        "postgresql+asyncpg://userimage:userimage@db:5432/userimage",
    )
    database_pool_mode: str = _env_str("DATABASE_POOL_MODE", "auto")
    database_pool_size: int = _env_int("DATABASE_POOL_SIZE", 5)
    database_pool_max_overflow: int = _env_int("DATABASE_POOL_MAX_OVERFLOW", 10)
    database_pool_timeout_seconds: int = _env_int("DATABASE_POOL_TIMEOUT_SECONDS", 30)
    public_dir: str = _env_str("PUBLIC_DIR", "public")
    profile_image_max_bytes: int = _env_int("PROFILE_IMAGE_MAX_BYTES", 5 * 1024 * 1024)
    serve_public_images: bool = _env_bool("SERVE_PUBLIC_IMAGES", True)
    cors_allow_origin: str = _env_str("CORS_ALLOW_ORIGIN", "*")
    cors_allow_methods: str = _env_str("CORS_ALLOW_METHODS", DEFAULT_CORS_ALLOW_METHODS)
    cors_allow_headers: str = _env_str("CORS_ALLOW_HEADERS", DEFAULT_CORS_ALLOW_HEADERS)
    log_level: str = _env_str("LOG_LEVEL", "INFO")
    log_format: str = _env_str("LOG_FORMAT", "console")
    log_requests: bool = _env_bool("LOG_REQUESTS", True)
    log_uvicorn_access: bool = _env_bool("LOG_UVICORN_ACCESS", False)
    log_request_skip_paths: str = _env_str("LOG_REQUEST_SKIP_PATHS", "/healthz")
    log_redact_fields: str = os.getenv("LOG_REDACT_FIELDS", "")

    @property
    def cors_headers(self) -> dict[str, str]:
        headers = {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Methods": self.cors_allow_methods,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
        }
        return {name: value for name, value in headers.items() if value}


settings = Settings()
