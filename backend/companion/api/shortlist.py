"""Shortlist endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from companion.api.deps import get_shortlist
from companion.domain.matching.schemas import UserMatch
from companion.domain.social.schemas import GetShortlistResponse, ShortlistRequest, ShortlistResponse
from companion.domain.social.shortlist import ShortlistRegistry

router = APIRouter(prefix="/api", tags=["shortlist"])


@router.post("/shortlist", response_model=ShortlistResponse)
async def add_to_shortlist_endpoint(
	payload: ShortlistRequest,
	shortlist: ShortlistRegistry = Depends(get_shortlist),
) -> ShortlistResponse:
	await shortlist.add(payload.username, payload.target_username)
	return ShortlistResponse(success=True, message="User added to shortlist")


@router.get("/shortlist/{username}", response_model=GetShortlistResponse)
async def get_shortlist_endpoint(
	username: str,
	shortlist: ShortlistRegistry = Depends(get_shortlist),
) -> GetShortlistResponse:
	profiles = await shortlist.list(username)
	return GetShortlistResponse(shortlist=[UserMatch.from_profile(profile) for profile in profiles])
