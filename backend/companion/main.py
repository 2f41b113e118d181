"""FastAPI application entrypoint."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from companion import obs
from companion.api import chat, ops, shortlist, users
from companion.api.errors import install_error_handlers
from companion.container import Container, build_container
from companion.settings import Settings, settings as default_settings

_DEV_ORIGINS = [
	"http://localhost:3000",
	"http://127.0.0.1:3000",
	"http://localhost:5173",
	"http://127.0.0.1:5173",
	"http://localhost:8080",
]


def _allowed_origins(settings: Settings) -> list[str]:
	allow_origins = list(settings.cors_allow_origins)
	if not allow_origins:
		return _DEV_ORIGINS if settings.is_dev() else []
	# Starlette disallows wildcard '*' with allow_credentials=True
	if "*" in allow_origins:
		return _DEV_ORIGINS if settings.is_dev() else [origin for origin in allow_origins if origin != "*"]
	return allow_origins


def create_app(
	settings: Optional[Settings] = None,
	*,
	container: Optional[Container] = None,
) -> FastAPI:
	settings = settings or default_settings
	app = FastAPI(title="Companion Matcher")
	app.state.container = container or build_container(settings)
	install_error_handlers(app)

	app.add_middleware(
		CORSMiddleware,
		allow_origins=_allowed_origins(settings),
		allow_credentials=True,
		allow_methods=["*"],
		allow_headers=["*"],
	)
	obs.init(app, settings)

	app.include_router(ops.router)
	app.include_router(users.router)
	app.include_router(shortlist.router)
	app.include_router(chat.router)
	return app


app = create_app()
