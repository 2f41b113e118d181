"""Derived match results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from companion.domain.identity.models import Profile


@dataclass(frozen=True, slots=True)
class MatchCandidate:
	profile: Profile
	shared_interests: Tuple[str, ...]
	compatibility_score: int

	@property
	def identifier(self) -> str:
		return self.profile.identifier
