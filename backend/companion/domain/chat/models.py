"""Domain models for direct-message conversations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from companion.domain.errors import BadRequest, InvalidPair

CONVERSATION_SEPARATOR = "_"


def _normalize(user_id: str) -> str:
	return str(user_id).strip().lower()


@dataclass(frozen=True, slots=True)
class ConversationKey:
	"""Canonical representation of a 1:1 conversation.

	Both participants are lower-cased and sorted, so either side initiating
	yields the same key. The joined form is part of the public contract:
	clients build it themselves to deep-link into a chat.
	"""

	user_a: str
	user_b: str

	@classmethod
	def from_participants(cls, user_one: str, user_two: str) -> "ConversationKey":
		first, second = sorted((_normalize(user_one), _normalize(user_two)))
		if not first or first == second:
			raise InvalidPair()
		return cls(user_a=first, user_b=second)

	@classmethod
	def parse(cls, conversation_id: str) -> "ConversationKey":
		tokens = _normalize(conversation_id or "").split(CONVERSATION_SEPARATOR)
		if len(tokens) != 2 or not all(tokens):
			raise BadRequest("Invalid conversation ID", reason="invalid_conversation_id")
		return cls.from_participants(tokens[0], tokens[1])

	@property
	def conversation_id(self) -> str:
		return f"{self.user_a}{CONVERSATION_SEPARATOR}{self.user_b}"

	def participants(self) -> Tuple[str, str]:
		return (self.user_a, self.user_b)

	def includes(self, user_id: str) -> bool:
		return _normalize(user_id) in (self.user_a, self.user_b)

	def other(self, user_id: str) -> str:
		normalized = _normalize(user_id)
		if normalized == self.user_a:
			return self.user_b
		if normalized == self.user_b:
			return self.user_a
		raise ValueError(f"{user_id!r} is not a participant of {self.conversation_id}")


@dataclass(frozen=True, slots=True)
class ChatMessage:
	"""One appended message. Marking it read swaps in a copy with ``read`` set."""

	message_id: str
	conversation_id: str
	seq: int
	sender_id: str
	receiver_id: str
	content: str
	timestamp: datetime
	read: bool = False

	def as_read(self) -> "ChatMessage":
		return replace(self, read=True)

	def to_dict(self) -> dict:
		return {
			"id": self.message_id,
			"conversation_id": self.conversation_id,
			"sender_id": self.sender_id,
			"receiver_id": self.receiver_id,
			"content": self.content,
			"timestamp": self.timestamp,
			"read": self.read,
		}


@dataclass(slots=True)
class Conversation:
	key: ConversationKey
	created_at: datetime
	last_activity: datetime
	last_message: Optional[ChatMessage] = None

	@property
	def conversation_id(self) -> str:
		return self.key.conversation_id

	def record(self, message: ChatMessage) -> None:
		"""Point the conversation at its newest message; activity never moves backward."""
		self.last_message = message
		if message.timestamp > self.last_activity:
			self.last_activity = message.timestamp


@dataclass(slots=True)
class MessagePage:
	messages: list[ChatMessage]
	total: int
	limit: int
	offset: int

	@property
	def has_more(self) -> bool:
		return self.offset + self.limit < self.total
