"""Operations endpoints: ping, liveness and Prometheus metrics."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from companion.api.deps import get_container
from companion.container import Container

router = APIRouter(prefix="", tags=["ops"])


async def require_metrics_access(
	container: Container = Depends(get_container),
	x_admin_token: Optional[str] = Header(default=None, alias="X-Admin-Token"),
) -> None:
	settings = container.settings
	if settings.obs_metrics_public:
		return
	if not settings.obs_admin_token or x_admin_token != settings.obs_admin_token:
		raise HTTPException(status.HTTP_403_FORBIDDEN, detail="metrics_forbidden")


@router.get("/api/ping")
async def ping() -> dict[str, str]:
	return {"message": "pong"}


@router.get("/health/live")
async def health_live(container: Container = Depends(get_container)) -> dict[str, Any]:
	return {
		"status": "ok",
		"profiles": len(container.directory),
		"conversations": len(container.conversations),
		"messages": len(container.messages),
	}


@router.get("/metrics")
async def prometheus_metrics(_: None = Depends(require_metrics_access)) -> Response:
	return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
