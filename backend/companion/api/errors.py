"""Global error handlers translating failures into ``{success: false, ...}`` bodies."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from companion.api.request_id import get_request_id
from companion.domain.errors import DomainError, InternalError
from companion.obs import metrics as obs_metrics

log = logging.getLogger(__name__)


def error_payload(request: Request, message: str, *, reason: str | None = None) -> dict:
	payload: dict = {"success": False, "message": message}
	if reason:
		payload["reason"] = reason
	payload["requestId"] = get_request_id(request)
	return payload


def domain_error_response(request: Request, exc: DomainError) -> JSONResponse:
	obs_metrics.inc_domain_error(exc.reason)
	if exc.status_code >= 500:
		log.error("domain_error", extra={"reason": exc.reason, "path": request.url.path})
	else:
		log.info("domain_error", extra={"reason": exc.reason, "status": exc.status_code})
	return JSONResponse(
		status_code=exc.status_code,
		content=error_payload(request, exc.message, reason=exc.reason),
	)


def install_error_handlers(app: FastAPI) -> None:
	@app.exception_handler(DomainError)
	async def domain_exc_handler(request: Request, exc: DomainError):  # type: ignore[override]
		return domain_error_response(request, exc)

	@app.exception_handler(StarletteHTTPException)
	async def http_exc_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
		return JSONResponse(
			status_code=exc.status_code,
			content=error_payload(request, str(exc.detail)),
			headers=getattr(exc, "headers", None),
		)

	@app.exception_handler(RequestValidationError)
	async def validation_exc_handler(request: Request, exc: RequestValidationError):  # type: ignore[override]
		errors = [
			{"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg"), "type": err.get("type")}
			for err in exc.errors()
		]
		payload = error_payload(request, "Invalid request payload", reason="validation_error")
		payload["errors"] = errors
		return JSONResponse(status_code=400, content=payload)

	@app.exception_handler(Exception)
	async def unhandled_exc_handler(request: Request, exc: Exception):  # type: ignore[override]
		log.exception("unhandled_error", extra={"path": request.url.path, "error": type(exc).__name__})
		# Unexpected failures answer as InternalError
		return domain_error_response(request, InternalError())
