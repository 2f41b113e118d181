"""Chat service: participant checks on top of the conversation and message stores."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from companion.api.pagination import clamp_window
from companion.domain.errors import BadRequest, Forbidden, NotFound, SelfMessageError
from companion.domain.identity.directory import UserDirectory
from companion.domain.identity.models import Profile
from companion.obs import metrics as obs_metrics
from companion.settings import Settings
from .models import ChatMessage, Conversation, ConversationKey, MessagePage
from .store import ConversationStore, MessageStore

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ConversationView:
	conversation: Conversation
	other_user: Profile
	unread_count: int = 0


class ChatService:
	def __init__(
		self,
		directory: UserDirectory,
		conversations: ConversationStore,
		messages: MessageStore,
		settings: Settings,
	) -> None:
		self._directory = directory
		self._conversations = conversations
		self._messages = messages
		self._settings = settings

	async def send_message(
		self,
		sender_id: Optional[str],
		receiver_id: Optional[str],
		content: Optional[str],
	) -> ChatMessage:
		text = (content or "").strip()
		if not (sender_id or "").strip() or not (receiver_id or "").strip() or not text:
			raise BadRequest("Sender, receiver, and content are required", reason="missing_fields")
		sender = await self._directory.get(sender_id)
		receiver = await self._directory.get(receiver_id)
		if sender is None or receiver is None:
			raise NotFound("One or both users not found", reason="user_not_found")
		if sender.identifier == receiver.identifier:
			raise SelfMessageError()
		if len(text) > self._settings.chat_message_max_length:
			raise BadRequest(
				f"Message content exceeds {self._settings.chat_message_max_length} characters",
				reason="content_too_long",
			)
		message = await self._messages.append(sender.identifier, receiver.identifier, text)
		obs_metrics.inc_chat_send()
		log.info(
			"chat_message_sent",
			extra={
				"conversation_id": message.conversation_id,
				"message_id": message.message_id,
				"seq": message.seq,
			},
		)
		return message

	async def list_conversations(self, user_id: Optional[str]) -> List[ConversationView]:
		if not (user_id or "").strip():
			raise BadRequest("Username is required", reason="missing_fields")
		user = await self._directory.get(user_id)
		if user is None:
			raise NotFound("User not found", reason="user_not_found")
		views: List[ConversationView] = []
		for conversation in await self._conversations.list_for(user.identifier):
			other = await self._directory.get(conversation.key.other(user.identifier))
			if other is None:
				continue
			unread = 0
			if self._settings.chat_compute_unread_counts:
				unread = await self._messages.count_unread(conversation.conversation_id, user.identifier)
			views.append(ConversationView(conversation=conversation, other_user=other, unread_count=unread))
		return views

	async def list_messages(
		self,
		requester_id: Optional[str],
		conversation_id: Optional[str],
		*,
		limit: str | int | None = None,
		offset: str | int | None = None,
	) -> MessagePage:
		_, key = await self._authorize(requester_id, conversation_id)
		# Opening a thread before the first message is allowed
		conversation = await self._conversations.resolve_key(key)
		bounded_limit, bounded_offset = clamp_window(
			limit,
			offset,
			default_limit=self._settings.chat_page_default_limit,
			max_limit=self._settings.chat_page_max_limit,
		)
		return await self._messages.page(
			conversation.conversation_id,
			limit=bounded_limit,
			offset=bounded_offset,
		)

	async def mark_read(self, requester_id: Optional[str], conversation_id: Optional[str]) -> int:
		requester, key = await self._authorize(requester_id, conversation_id)
		if await self._conversations.get(key.conversation_id) is None:
			return 0
		updated = await self._messages.mark_read(key.conversation_id, requester.identifier)
		obs_metrics.inc_chat_read(updated)
		log.info(
			"chat_messages_marked_read",
			extra={"conversation_id": key.conversation_id, "updated": updated},
		)
		return updated

	async def _authorize(
		self,
		requester_id: Optional[str],
		conversation_id: Optional[str],
	) -> Tuple[Profile, ConversationKey]:
		if not (requester_id or "").strip() or not (conversation_id or "").strip():
			raise BadRequest("Username and conversation ID are required", reason="missing_fields")
		requester = await self._directory.get(requester_id)
		if requester is None:
			raise NotFound("User not found", reason="user_not_found")
		key = ConversationKey.parse(conversation_id or "")
		if not key.includes(requester.identifier):
			raise Forbidden()
		if await self._directory.get(key.other(requester.identifier)) is None:
			raise NotFound("Conversation participant not found", reason="participant_not_found")
		return requester, key
