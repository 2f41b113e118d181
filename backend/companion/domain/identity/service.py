"""Profile creation: field checks, normalization and directory insert."""

from __future__ import annotations

import logging
from typing import Optional

from companion.domain.errors import BadRequest
from companion.obs import metrics as obs_metrics
from .directory import UserDirectory
from .models import Profile, normalize_identifier, normalize_interests
from .schemas import CreateUserRequest

log = logging.getLogger(__name__)

MIN_AGE = 13
MAX_AGE = 120
# "_" joins conversation ids; "/" cannot travel inside a user path segment
IDENTIFIER_FORBIDDEN_CHARS = ("_", "/")


def _optional_text(value: Optional[str]) -> Optional[str]:
	if value is None:
		return None
	text = value.strip()
	return text or None


def build_profile(payload: CreateUserRequest) -> Profile:
	name = (payload.name or "").strip()
	if not name:
		raise BadRequest("Name is required and must be a non-empty string", reason="name_required")
	identifier = normalize_identifier(name)
	if any(char in identifier for char in IDENTIFIER_FORBIDDEN_CHARS):
		raise BadRequest("Name must not contain underscores or slashes", reason="name_invalid")
	if payload.age is None or not MIN_AGE <= payload.age <= MAX_AGE:
		raise BadRequest(f"Age is required and must be between {MIN_AGE} and {MAX_AGE}", reason="age_invalid")
	interests = normalize_interests(payload.interests or [])
	if not interests:
		raise BadRequest("Interests are required and must be a non-empty array", reason="interests_required")
	return Profile(
		identifier=identifier,
		name=name,
		age=payload.age,
		interests=interests,
		photo=payload.photo or None,
		bio=_optional_text(payload.bio),
		location=_optional_text(payload.location),
		occupation=_optional_text(payload.occupation),
		looking_for=_optional_text(payload.looking_for),
	)


async def create_profile(directory: UserDirectory, payload: CreateUserRequest) -> Profile:
	profile = build_profile(payload)
	await directory.add(profile)
	obs_metrics.inc_profile_created()
	log.info(
		"profile_created",
		extra={"identifier": profile.identifier, "interest_count": len(profile.interests)},
	)
	return profile
