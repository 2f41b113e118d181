"""Explicit wiring of stores and services.

The directory is built first and handed to everything that reads profiles, so
no component depends on initialisation order or module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass

from companion.domain.chat.service import ChatService
from companion.domain.chat.store import Clock, ConversationStore, MessageStore
from companion.domain.identity.directory import UserDirectory
from companion.domain.matching.service import MatchingService
from companion.domain.social.shortlist import ShortlistRegistry
from companion.settings import Settings


@dataclass(slots=True)
class Container:
	settings: Settings
	directory: UserDirectory
	conversations: ConversationStore
	messages: MessageStore
	matching: MatchingService
	chat: ChatService
	shortlist: ShortlistRegistry


def build_container(settings: Settings, *, clock: Clock | None = None) -> Container:
	directory = UserDirectory()
	conversations = ConversationStore(clock=clock)
	messages = MessageStore(conversations, clock=clock)
	return Container(
		settings=settings,
		directory=directory,
		conversations=conversations,
		messages=messages,
		matching=MatchingService(directory),
		chat=ChatService(directory, conversations, messages, settings),
		shortlist=ShortlistRegistry(directory),
	)
