"""Pydantic schemas for the messaging API."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, Field

from companion.domain.identity.schemas import UserProfileResponse
from companion.domain.schemas import CamelModel
from .models import ChatMessage


class SendMessageRequest(CamelModel):
	receiver_id: Optional[str] = Field(
		default=None,
		validation_alias=AliasChoices("receiverId", "receiverUsername", "receiver_id"),
		description="Target user identifier",
	)
	content: Optional[str] = Field(default=None, examples=["hi"])


class MessageData(CamelModel):
	id: str
	conversation_id: str
	sender_id: str
	receiver_id: str
	content: str
	timestamp: datetime
	read: bool

	@classmethod
	def from_model(cls, message: ChatMessage) -> "MessageData":
		return cls(**message.to_dict())


class SendMessageResponse(CamelModel):
	success: bool
	message: Optional[str] = None
	message_data: Optional[MessageData] = None


class ConversationWithUser(CamelModel):
	id: str
	other_user: UserProfileResponse
	last_message: Optional[MessageData] = None
	last_activity: datetime
	unread_count: int = 0


class GetConversationsResponse(CamelModel):
	conversations: List[ConversationWithUser]


class GetMessagesResponse(CamelModel):
	messages: List[MessageData]
	total_messages: int
	has_more: bool


class MarkReadResponse(CamelModel):
	success: bool
	message: str
	updated_count: int
