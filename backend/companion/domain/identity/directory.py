"""In-memory user directory keyed by normalized identifier."""

from __future__ import annotations

import asyncio
from typing import List, Optional

from companion.domain.errors import Conflict
from .models import Profile, normalize_identifier


class UserDirectory:
	"""Profiles keyed by lower-cased identifier, kept in insertion order."""

	def __init__(self) -> None:
		self._lock = asyncio.Lock()
		self._profiles: dict[str, Profile] = {}

	def __len__(self) -> int:
		return len(self._profiles)

	async def get(self, identifier: str | None) -> Optional[Profile]:
		if not identifier:
			return None
		return self._profiles.get(normalize_identifier(identifier))

	async def add(self, profile: Profile) -> Profile:
		async with self._lock:
			if profile.identifier in self._profiles:
				raise Conflict("User with this name already exists", reason="user_exists")
			self._profiles[profile.identifier] = profile
			return profile

	async def all(self) -> List[Profile]:
		return list(self._profiles.values())
