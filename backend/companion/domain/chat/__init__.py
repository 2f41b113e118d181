"""Chat domain exports."""

from .models import ChatMessage, Conversation, ConversationKey, MessagePage
from .service import ChatService, ConversationView
from .store import ConversationStore, MessageStore

__all__ = [
	"ChatMessage",
	"ChatService",
	"Conversation",
	"ConversationKey",
	"ConversationStore",
	"ConversationView",
	"MessagePage",
	"MessageStore",
]
