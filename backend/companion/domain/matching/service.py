"""Interest-overlap matching.

Every query rescans the whole directory: for each other profile the shared
interest set is computed, candidates sharing fewer than two interests are
dropped, and the rest are scored against the larger of the two interest sets
so a profile listing many unrelated interests is not over-rewarded for a small
overlap. Results are never cached.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from companion.domain.errors import NotFound
from companion.domain.identity.directory import UserDirectory
from companion.domain.identity.models import Profile, normalize_identifier
from companion.obs import metrics as obs_metrics
from .models import MatchCandidate

log = logging.getLogger(__name__)

MIN_SHARED_INTERESTS = 2


def compatibility_score(shared_count: int, target_count: int, candidate_count: int) -> int:
	"""Percentage of the larger interest set covered by the overlap, rounded half up."""
	denominator = max(target_count, candidate_count)
	if denominator <= 0:
		return 0
	# Integer form of floor(100 * shared / denominator + 0.5)
	return (200 * shared_count + denominator) // (2 * denominator)


def score_candidate(target: Profile, candidate: Profile) -> MatchCandidate | None:
	target_interests = target.interest_set
	candidate_interests = candidate.interest_set
	shared = target_interests & candidate_interests
	if len(shared) < MIN_SHARED_INTERESTS:
		return None
	score = compatibility_score(len(shared), len(target_interests), len(candidate_interests))
	return MatchCandidate(
		profile=candidate,
		shared_interests=tuple(sorted(shared)),
		compatibility_score=score,
	)


def rank_candidates(target: Profile, profiles: Iterable[Profile]) -> List[MatchCandidate]:
	"""Score every other profile and order by score desc, then identifier asc."""
	candidates: List[MatchCandidate] = []
	for profile in profiles:
		if profile.identifier == target.identifier:
			continue
		candidate = score_candidate(target, profile)
		if candidate is not None:
			candidates.append(candidate)
	candidates.sort(key=lambda c: (-c.compatibility_score, c.profile.identifier))
	return candidates


class MatchingService:
	def __init__(self, directory: UserDirectory) -> None:
		self._directory = directory

	async def compute_matches(self, target_id: str) -> List[MatchCandidate]:
		target = await self._directory.get(target_id)
		if target is None:
			raise NotFound("User not found", reason="user_not_found")
		profiles = await self._directory.all()
		matches = rank_candidates(target, profiles)
		obs_metrics.observe_match_query(len(matches))
		log.debug(
			"matches_computed",
			extra={
				"target": normalize_identifier(target_id),
				"directory_size": len(profiles),
				"candidates": len(matches),
			},
		)
		return matches
