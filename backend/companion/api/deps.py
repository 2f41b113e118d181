"""FastAPI dependencies resolving services from the application container."""

from __future__ import annotations

from fastapi import Request

from companion.container import Container
from companion.domain.chat.service import ChatService
from companion.domain.identity.directory import UserDirectory
from companion.domain.matching.service import MatchingService
from companion.domain.social.shortlist import ShortlistRegistry


def get_container(request: Request) -> Container:
	return request.app.state.container


def get_directory(request: Request) -> UserDirectory:
	return get_container(request).directory


def get_matching(request: Request) -> MatchingService:
	return get_container(request).matching


def get_chat(request: Request) -> ChatService:
	return get_container(request).chat


def get_shortlist(request: Request) -> ShortlistRegistry:
	return get_container(request).shortlist
