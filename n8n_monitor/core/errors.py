"""
Error taxonomy and HTTP mapping for the n8n monitor backend.

Services raise the exceptions defined here; the handlers registered by
`register_exception_handlers` turn them into JSON responses so no failure
escapes a request.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger("errors")


class DashboardError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"message": self.message}


class InvalidInput(DashboardError):
    status_code = 400
    message = "Invalid data format"

    def __init__(self, errors: list[dict], message: Optional[str] = None) -> None:
        self.errors = errors
        super().__init__(message)

    def to_payload(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class NotFound(DashboardError):
    status_code = 404
    message = "Not found"


class ConfigurationMissing(NotFound):
    message = "No n8n configuration found"


class InvalidBody(DashboardError):
    """A stored webhook test body could not be parsed; `detail` is the parse error."""

    status_code = 500
    message = "Failed to execute webhook test"

    def __init__(self, detail: str, message: Optional[str] = None) -> None:
        self.detail = detail
        super().__init__(message)

    def to_payload(self) -> dict:
        return {"message": self.message, "error": self.detail}


class StorageFailure(DashboardError):
    status_code = 500
    message = "Storage operation failed"


class UpstreamFailure(DashboardError):
    """
    An upstream call failed.

    `status_code` is the upstream HTTP status when a response arrived, else
    None (transport failure: DNS, refused connection, timeout). `detail` is
    the upstream body or the transport error message.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, detail: Any = None) -> None:
        self.upstream_status = status_code
        self.detail = detail
        super().__init__(message)

    @property
    def is_transport_failure(self) -> bool:
        return self.upstream_status is None

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return self.upstream_status or 500

    def to_payload(self) -> dict:
        return {"message": self.message, "error": self.detail}


def log_exception(
    log: logging.Logger,
    message: str,
    *,
    extra: Optional[Mapping[str, Any]] = None,
    exc: Optional[BaseException] = None,
) -> None:
    """Log a caught exception with its traceback and optional context."""
    context = ""
    if extra:
        context = " " + " ".join(f"{key}={value}" for key, value in extra.items())
    if exc is not None:
        log.error("%s%s err=%s", message, context, exc, exc_info=(type(exc), exc, exc.__traceback__))
    else:
        log.exception("%s%s", message, context)


def validation_errors(exc: Exception) -> list[dict]:
    """Flatten pydantic errors into a JSON-safe list without echoing input values."""
    raw = exc.errors() if hasattr(exc, "errors") else []
    out = []
    for err in raw:
        out.append(
            {
                "loc": [str(part) for part in err.get("loc", ())],
                "msg": err.get("msg", ""),
                "type": err.get("type", ""),
            }
        )
    return jsonable_encoder(out)


async def _dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    if isinstance(exc, StorageFailure):
        log_exception(logger, exc.message, extra={"path": request.url.path}, exc=exc.__cause__ or exc)
    elif isinstance(exc, UpstreamFailure):
        logger.warning(
            "Upstream failure path=%s status=%s message=%s",
            request.url.path,
            exc.upstream_status,
            exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_payload()))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = InvalidInput(validation_errors(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log_exception(logger, "Unhandled error", extra={"path": request.url.path}, exc=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DashboardError, _dashboard_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
