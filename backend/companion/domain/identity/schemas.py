"""Pydantic schemas for profile creation and profile payloads."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from companion.domain.schemas import CamelModel
from .models import Profile


class CreateUserRequest(CamelModel):
	name: Optional[str] = Field(default=None, examples=["Alice"])
	age: Optional[int] = Field(default=None, examples=[27])
	interests: Optional[List[str]] = Field(default=None, examples=[["music", "tech", "art"]])
	photo: Optional[str] = Field(default=None, description="Base64 data URL or remote URL")
	bio: Optional[str] = None
	location: Optional[str] = None
	occupation: Optional[str] = None
	looking_for: Optional[str] = None


class UserProfileResponse(CamelModel):
	name: str
	age: int
	interests: List[str]
	photo: Optional[str] = None
	bio: Optional[str] = None
	location: Optional[str] = None
	occupation: Optional[str] = None
	looking_for: Optional[str] = None

	@classmethod
	def from_model(cls, profile: Profile) -> "UserProfileResponse":
		return cls(**profile.to_dict())


class CreateUserResponse(CamelModel):
	success: bool
	message: str
	user: Optional[UserProfileResponse] = None


class InterestOptionsResponse(CamelModel):
	interests: List[str]
	looking_for: List[str]
