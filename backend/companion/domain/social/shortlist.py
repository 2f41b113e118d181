"""Per-user shortlist of favorited profiles."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from companion.domain.errors import BadRequest, NotFound
from companion.domain.identity.directory import UserDirectory
from companion.domain.identity.models import Profile
from companion.obs import metrics as obs_metrics

log = logging.getLogger(__name__)


class ShortlistRegistry:
	"""Insertion-ordered set of shortlisted identifiers per user."""

	def __init__(self, directory: UserDirectory) -> None:
		self._lock = asyncio.Lock()
		self._directory = directory
		self._entries: dict[str, dict[str, None]] = {}

	async def add(self, username: Optional[str], target_username: Optional[str]) -> None:
		if not (username or "").strip() or not (target_username or "").strip():
			raise BadRequest("Both username and targetUsername are required", reason="missing_fields")
		owner = await self._directory.get(username)
		target = await self._directory.get(target_username)
		if owner is None or target is None:
			raise NotFound("One or both users not found", reason="user_not_found")
		if owner.identifier == target.identifier:
			raise BadRequest("Cannot shortlist yourself", reason="self_shortlist")
		async with self._lock:
			self._entries.setdefault(owner.identifier, {})[target.identifier] = None
		obs_metrics.inc_shortlist_add()
		log.info("shortlist_added", extra={"owner": owner.identifier, "target": target.identifier})

	async def list(self, username: Optional[str]) -> List[Profile]:
		if not (username or "").strip():
			raise BadRequest("Username is required", reason="missing_fields")
		owner = await self._directory.get(username)
		if owner is None:
			return []
		async with self._lock:
			identifiers = list(self._entries.get(owner.identifier, {}))
		profiles: List[Profile] = []
		for identifier in identifiers:
			profile = await self._directory.get(identifier)
			if profile is not None:
				profiles.append(profile)
		return profiles
