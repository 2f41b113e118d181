"""FastAPI endpoints for direct messaging."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from companion.api.deps import get_chat
from companion.domain.chat.schemas import (
	ConversationWithUser,
	GetConversationsResponse,
	GetMessagesResponse,
	MarkReadResponse,
	MessageData,
	SendMessageRequest,
	SendMessageResponse,
)
from companion.domain.chat.service import ChatService
from companion.domain.identity.schemas import UserProfileResponse

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
	"/messages/{sender_id}",
	response_model=SendMessageResponse,
	status_code=status.HTTP_201_CREATED,
)
async def send_message_endpoint(
	sender_id: str,
	payload: SendMessageRequest,
	chat: ChatService = Depends(get_chat),
) -> SendMessageResponse:
	message = await chat.send_message(sender_id, payload.receiver_id, payload.content)
	return SendMessageResponse(
		success=True,
		message="Message sent successfully",
		message_data=MessageData.from_model(message),
	)


@router.get("/conversations/{user_id}", response_model=GetConversationsResponse)
async def list_conversations_endpoint(
	user_id: str,
	chat: ChatService = Depends(get_chat),
) -> GetConversationsResponse:
	views = await chat.list_conversations(user_id)
	return GetConversationsResponse(
		conversations=[
			ConversationWithUser(
				id=view.conversation.conversation_id,
				other_user=UserProfileResponse.from_model(view.other_user),
				last_message=(
					MessageData.from_model(view.conversation.last_message)
					if view.conversation.last_message
					else None
				),
				last_activity=view.conversation.last_activity,
				unread_count=view.unread_count,
			)
			for view in views
		]
	)


@router.get("/messages/{user_id}/{conversation_id}", response_model=GetMessagesResponse)
async def list_messages_endpoint(
	user_id: str,
	conversation_id: str,
	*,
	# Raw strings: unusable values fall back to defaults instead of failing validation
	limit: str | None = Query(default=None),
	offset: str | None = Query(default=None),
	chat: ChatService = Depends(get_chat),
) -> GetMessagesResponse:
	page = await chat.list_messages(user_id, conversation_id, limit=limit, offset=offset)
	return GetMessagesResponse(
		messages=[MessageData.from_model(message) for message in page.messages],
		total_messages=page.total,
		has_more=page.has_more,
	)


@router.put("/messages/{user_id}/{conversation_id}/read", response_model=MarkReadResponse)
async def mark_read_endpoint(
	user_id: str,
	conversation_id: str,
	chat: ChatService = Depends(get_chat),
) -> MarkReadResponse:
	updated = await chat.mark_read(user_id, conversation_id)
	return MarkReadResponse(
		success=True,
		message=f"Marked {updated} messages as read",
		updated_count=updated,
	)
