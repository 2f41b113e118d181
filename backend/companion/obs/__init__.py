"""Observability package bootstrap."""

from __future__ import annotations

from fastapi import FastAPI

from companion.obs import logging as obs_logging
from companion.obs import middleware
from companion.settings import Settings

_logging_configured = False


def init(app: FastAPI, settings: Settings) -> None:
	global _logging_configured
	# Root logger is process-wide; each app instance still gets its own middleware
	if settings.obs_enabled and not _logging_configured:
		obs_logging.configure_logging()
		_logging_configured = True
	middleware.install(app, enabled=settings.obs_enabled)


__all__ = ["init"]
