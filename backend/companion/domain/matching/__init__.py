"""Matching domain exports."""

from .service import MIN_SHARED_INTERESTS, MatchingService, compatibility_score, rank_candidates

__all__ = [
	"MIN_SHARED_INTERESTS",
	"MatchingService",
	"compatibility_score",
	"rank_candidates",
]
