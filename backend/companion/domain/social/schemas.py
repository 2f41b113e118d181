"""Schemas for the shortlist endpoints."""

from __future__ import annotations

from typing import List, Optional

from companion.domain.matching.schemas import UserMatch
from companion.domain.schemas import CamelModel


class ShortlistRequest(CamelModel):
	username: Optional[str] = None
	target_username: Optional[str] = None


class ShortlistResponse(CamelModel):
	success: bool
	message: str


class GetShortlistResponse(CamelModel):
	shortlist: List[UserMatch]
