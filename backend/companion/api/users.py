"""Profile creation, match listing and the interest catalog."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from companion.api.deps import get_directory, get_matching
from companion.domain.identity import catalog
from companion.domain.identity.directory import UserDirectory
from companion.domain.identity.schemas import (
	CreateUserRequest,
	CreateUserResponse,
	InterestOptionsResponse,
	UserProfileResponse,
)
from companion.domain.identity.service import create_profile
from companion.domain.matching.schemas import GetMatchesResponse, UserMatch
from companion.domain.matching.service import MatchingService

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/users", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user_endpoint(
	payload: CreateUserRequest,
	directory: UserDirectory = Depends(get_directory),
) -> CreateUserResponse:
	profile = await create_profile(directory, payload)
	return CreateUserResponse(
		success=True,
		message="User created successfully",
		user=UserProfileResponse.from_model(profile),
	)


@router.get("/matches/{username}", response_model=GetMatchesResponse)
async def get_matches_endpoint(
	username: str,
	matching: MatchingService = Depends(get_matching),
) -> GetMatchesResponse:
	candidates = await matching.compute_matches(username)
	matches = [UserMatch.from_candidate(candidate) for candidate in candidates]
	return GetMatchesResponse(matches=matches, total_matches=len(matches))


@router.get("/interests", response_model=InterestOptionsResponse)
async def interest_options_endpoint() -> InterestOptionsResponse:
	return InterestOptionsResponse(
		interests=list(catalog.INTERESTS_OPTIONS),
		looking_for=list(catalog.LOOKING_FOR_OPTIONS),
	)
