"""Pydantic schemas for match listings."""

from __future__ import annotations

from typing import List, Optional

from companion.domain.identity.models import Profile
from companion.domain.schemas import CamelModel
from .models import MatchCandidate


class UserMatch(CamelModel):
	name: str
	interests: List[str]
	shared_interests: Optional[List[str]] = None
	compatibility_score: Optional[int] = None
	age: Optional[int] = None
	photo: Optional[str] = None
	bio: Optional[str] = None
	location: Optional[str] = None
	occupation: Optional[str] = None
	looking_for: Optional[str] = None

	@classmethod
	def from_profile(cls, profile: Profile) -> "UserMatch":
		return cls(**profile.to_dict())

	@classmethod
	def from_candidate(cls, candidate: MatchCandidate) -> "UserMatch":
		return cls(
			**candidate.profile.to_dict(),
			shared_interests=list(candidate.shared_interests),
			compatibility_score=candidate.compatibility_score,
		)


class GetMatchesResponse(CamelModel):
	matches: List[UserMatch]
	total_matches: int
