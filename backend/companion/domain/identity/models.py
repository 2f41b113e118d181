"""Domain models for user profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


def normalize_identifier(value: str) -> str:
	"""Directory key for a display name or username: trimmed and lower-cased."""
	return str(value).strip().lower()


def normalize_interests(raw: Iterable[str]) -> Tuple[str, ...]:
	seen: dict[str, None] = {}
	for item in raw:
		tag = str(item).strip().lower()
		if tag:
			seen.setdefault(tag, None)
	return tuple(seen)


@dataclass(frozen=True, slots=True)
class Profile:
	identifier: str
	name: str
	age: int
	interests: Tuple[str, ...]
	photo: Optional[str] = None
	bio: Optional[str] = None
	location: Optional[str] = None
	occupation: Optional[str] = None
	looking_for: Optional[str] = None

	@property
	def interest_set(self) -> frozenset[str]:
		return frozenset(self.interests)

	def to_dict(self) -> dict:
		return {
			"name": self.name,
			"age": self.age,
			"interests": list(self.interests),
			"photo": self.photo,
			"bio": self.bio,
			"location": self.location,
			"occupation": self.occupation,
			"looking_for": self.looking_for,
		}
