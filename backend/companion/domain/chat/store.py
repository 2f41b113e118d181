"""In-memory conversation and message stores.

``ConversationStore`` owns conversation records; ``MessageStore`` owns message
records and is the single writer for conversation metadata. Every append runs
under the message store's lock, so appends to one conversation land in the
order they were received and ``last_message``/``last_activity`` are updated in
the same critical section as the append itself.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Callable, List, Optional

import ulid

from .models import ChatMessage, Conversation, ConversationKey, MessagePage

Clock = Callable[[], datetime]


def utcnow() -> datetime:
	return datetime.now(timezone.utc)


class ConversationStore:
	def __init__(self, clock: Clock | None = None) -> None:
		self._lock = asyncio.Lock()
		self._conversations: dict[str, Conversation] = {}
		self._clock = clock or utcnow

	def __len__(self) -> int:
		return len(self._conversations)

	async def resolve(self, user_one: str, user_two: str) -> Conversation:
		"""Return the conversation for an unordered pair, creating it on first use."""
		key = ConversationKey.from_participants(user_one, user_two)
		return await self.resolve_key(key)

	async def resolve_key(self, key: ConversationKey) -> Conversation:
		async with self._lock:
			conversation = self._conversations.get(key.conversation_id)
			if conversation is None:
				now = self._clock()
				conversation = Conversation(key=key, created_at=now, last_activity=now)
				self._conversations[key.conversation_id] = conversation
			return conversation

	async def get(self, conversation_id: str) -> Optional[Conversation]:
		return self._conversations.get(conversation_id)

	async def list_for(self, user_id: str) -> List[Conversation]:
		"""Conversations including ``user_id``, most recent activity first."""
		async with self._lock:
			matching = [c for c in self._conversations.values() if c.key.includes(user_id)]
		matching.sort(key=lambda c: c.conversation_id)
		matching.sort(key=lambda c: c.last_activity, reverse=True)
		return matching


class MessageStore:
	def __init__(self, conversations: ConversationStore, clock: Clock | None = None) -> None:
		self._lock = asyncio.Lock()
		self._conversations = conversations
		self._messages: dict[str, List[ChatMessage]] = {}
		self._by_id: dict[str, ChatMessage] = {}
		self._clock = clock or utcnow

	def __len__(self) -> int:
		return len(self._by_id)

	async def append(self, sender_id: str, receiver_id: str, content: str) -> ChatMessage:
		key = ConversationKey.from_participants(sender_id, receiver_id)
		async with self._lock:
			conversation = await self._conversations.resolve_key(key)
			messages = self._messages.setdefault(key.conversation_id, [])
			# Clock skew must not reorder a conversation
			timestamp = max(self._clock(), conversation.last_activity)
			message = ChatMessage(
				message_id=str(ulid.new()),
				conversation_id=key.conversation_id,
				seq=messages[-1].seq + 1 if messages else 1,
				sender_id=sender_id,
				receiver_id=receiver_id,
				content=content,
				timestamp=timestamp,
			)
			messages.append(message)
			self._by_id[message.message_id] = message
			conversation.record(message)
			return message

	async def list_messages(self, conversation_id: str) -> List[ChatMessage]:
		"""All messages of a conversation, oldest first."""
		async with self._lock:
			messages = list(self._messages.get(conversation_id, []))
		messages.sort(key=lambda m: (m.timestamp, m.seq))
		return messages

	async def page(self, conversation_id: str, *, limit: int, offset: int) -> MessagePage:
		messages = await self.list_messages(conversation_id)
		return MessagePage(
			messages=messages[offset : offset + limit],
			total=len(messages),
			limit=limit,
			offset=offset,
		)

	async def mark_read(self, conversation_id: str, reader_id: str) -> int:
		updated = 0
		async with self._lock:
			messages = self._messages.get(conversation_id, [])
			for index, message in enumerate(messages):
				if message.receiver_id == reader_id and not message.read:
					read_copy = message.as_read()
					messages[index] = read_copy
					self._by_id[read_copy.message_id] = read_copy
					updated += 1
			conversation = await self._conversations.get(conversation_id)
			if updated and conversation is not None:
				# Appends keep the newest message last
				conversation.last_message = messages[-1]
		return updated

	async def count_unread(self, conversation_id: str, reader_id: str) -> int:
		async with self._lock:
			return sum(
				1
				for message in self._messages.get(conversation_id, [])
				if message.receiver_id == reader_id and not message.read
			)
