from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
import sys
from typing import Any

from userimage.logging_context import get_request_id

DEFAULT_REDACT_FIELDS = {
    "authorization",
    "cookie",
    "database_url",
    "password",
    "set_cookie",
}

_BASE_RECORD = logging.makeLogRecord({})
_STANDARD_RECORD_FIELDS = set(_BASE_RECORD.__dict__.keys()) | {"message", "asctime"}
_NOISY_RECORD_FIELDS = {"color_message"}
_FRAMEWORK_LOGGERS = ("uvicorn", "uvicorn.error")


def parse_redact_fields(raw: str | None) -> set[str]:
    fields = {field.strip().lower() for field in (raw or "").split(",") if field.strip()}
    return DEFAULT_REDACT_FIELDS | fields


def configure_logging(
    *,
    level: str,
    log_format: str,
    redact_fields: set[str],
    include_uvicorn_access: bool,
) -> None:
    normalized_level = _normalize_level(level)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(normalized_level)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(normalized_level)
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(build_formatter(log_format, redact_fields=redact_fields))
    root_logger.addHandler(handler)

    # uvicorn installs its own handlers; funnel everything through the root one.
    for logger_name in _FRAMEWORK_LOGGERS:
        framework_logger = logging.getLogger(logger_name)
        framework_logger.handlers.clear()
        framework_logger.propagate = True
        framework_logger.setLevel(normalized_level)

    access_logger = logging.getLogger("uvicorn.access")
    access_logger.handlers.clear()
    access_logger.propagate = True
    access_logger.setLevel(normalized_level if include_uvicorn_access else logging.WARNING)


def build_formatter(log_format: str, *, redact_fields: set[str]) -> logging.Formatter:
    if log_format.strip().lower() == "json":
        return JsonLogFormatter(redact_fields=redact_fields)
    return ConsoleLogFormatter(redact_fields=redact_fields)


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            request_id = get_request_id()
            if request_id:
                record.request_id = request_id
        return True


class JsonLogFormatter(logging.Formatter):
    def __init__(self, *, redact_fields: set[str]) -> None:
        super().__init__()
        self._redact_fields = {field.lower() for field in redact_fields}

    def to_payload(self, record: logging.LogRecord) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "timestamp": _format_timestamp(record.created),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": getattr(record, "event", record.getMessage()),
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            payload["request_id"] = request_id
        for key, value in _extra_fields(record).items():
            payload[key] = self._redact_value(key, value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return payload

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.to_payload(record), ensure_ascii=True, default=str)

    def _redact_value(self, key: str, value: Any) -> Any:
        if key.lower() in self._redact_fields:
            return "[REDACTED]"
        if isinstance(value, dict):
            return {nested_key: self._redact_value(nested_key, nested) for nested_key, nested in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._redact_value(key, item) for item in value]
        return value


_CONSOLE_SHORT_KEYS = {
    "user_id": "user",
    "identifier_kind": "id_kind",
    "image_url": "image",
}
_CONSOLE_LEADING_KEYS = ("timestamp", "level", "logger", "event", "exception")


class ConsoleLogFormatter(logging.Formatter):
    def __init__(self, *, redact_fields: set[str]) -> None:
        super().__init__()
        self._json_formatter = JsonLogFormatter(redact_fields=redact_fields)

    def format(self, record: logging.LogRecord) -> str:
        payload = self._json_formatter.to_payload(record)
        parts: list[Any] = [
            payload.get("timestamp", ""),
            _short_level(str(payload.get("level", "info"))),
            payload.get("logger", "userimage"),
            payload.get("event", ""),
        ]

        request_id = payload.pop("request_id", None)
        method = payload.pop("method", None)
        path = payload.pop("path", None)
        status_code = payload.pop("status_code", None)
        duration_ms = payload.pop("duration_ms", None)

        if request_id:
            parts.append(f"rid={request_id}")
        if method and path:
            parts.append(f"{method} {path}")
        if status_code is not None:
            parts.append(str(status_code))
        if duration_ms is not None:
            parts.append(f"{duration_ms}ms")

        for key in sorted(payload):
            if key in _CONSOLE_LEADING_KEYS:
                continue
            parts.append(f"{_CONSOLE_SHORT_KEYS.get(key, key)}={payload[key]}")

        if "exception" in payload:
            parts.append(f"exception={payload['exception']}")

        return " | ".join(str(part) for part in parts if part)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_RECORD_FIELDS
        and key not in _NOISY_RECORD_FIELDS
        and key != "request_id"
        and not key.startswith("_")
    }


def _normalize_level(level: str) -> int:
    mapping = logging.getLevelNamesMapping()
    return mapping.get(level.strip().upper(), logging.INFO)


def _format_timestamp(created_ts: float) -> str:
    return datetime.fromtimestamp(created_ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%SZ")


def _short_level(level: str) -> str:
    mapping = {
        "debug": "DBG",
        "info": "INF",
        "warning": "WRN",
        "error": "ERR",
        "critical": "CRT",
    }
    return mapping.get(level.lower(), level[:3].upper())
