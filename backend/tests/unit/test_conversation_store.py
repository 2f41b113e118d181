import asyncio
import dataclasses

import pytest

from companion.domain.chat.models import ConversationKey
from companion.domain.chat.store import ConversationStore, MessageStore
from companion.domain.errors import BadRequest, InvalidPair


def test_key_is_order_independent_and_lowercased():
	forward = ConversationKey.from_participants("Alice", "bob")
	backward = ConversationKey.from_participants("BOB", "alice")

	assert forward == backward
	assert forward.conversation_id == "alice_bob"
	assert forward.participants() == ("alice", "bob")
	assert forward.other("ALICE") == "bob"


def test_key_rejects_identical_participants():
	with pytest.raises(InvalidPair):
		ConversationKey.from_participants("alice", "Alice")


@pytest.mark.parametrize("raw", ["alice", "alice_bob_carol", "_bob", "alice_", ""])
def test_parse_rejects_malformed_ids(raw):
	with pytest.raises(BadRequest):
		ConversationKey.parse(raw)


def test_parse_canonicalises_order():
	assert ConversationKey.parse("Bob_Alice").conversation_id == "alice_bob"


@pytest.mark.asyncio
async def test_resolve_returns_same_conversation_either_way(clock):
	store = ConversationStore(clock=clock)

	first = await store.resolve("alice", "bob")
	second = await store.resolve("Bob", "Alice")

	assert first is second
	assert len(store) == 1
	assert first.last_message is None


@pytest.mark.asyncio
async def test_resolve_rejects_self_pair(clock):
	store = ConversationStore(clock=clock)

	with pytest.raises(InvalidPair):
		await store.resolve("alice", "alice")


@pytest.mark.asyncio
async def test_append_updates_conversation_metadata(clock):
	conversations = ConversationStore(clock=clock)
	messages = MessageStore(conversations, clock=clock)

	message = await messages.append("alice", "bob", "hi")
	conversation = await conversations.get("alice_bob")

	assert conversation is not None
	assert conversation.last_message is message
	assert conversation.last_activity == message.timestamp
	assert message.seq == 1
	assert message.read is False


@pytest.mark.asyncio
async def test_timestamps_never_move_backward(clock):
	conversations = ConversationStore(clock=clock)
	messages = MessageStore(conversations, clock=clock)

	first = await messages.append("alice", "bob", "one")
	# Simulate a clock that jumps into the past
	clock.current = first.timestamp.replace(year=first.timestamp.year - 1)
	second = await messages.append("bob", "alice", "two")
	conversation = await conversations.get("alice_bob")

	assert second.timestamp >= first.timestamp
	assert conversation.last_message is second
	assert conversation.last_activity == second.timestamp

	listed = await messages.list_messages("alice_bob")
	assert [m.content for m in listed] == ["one", "two"]


@pytest.mark.asyncio
async def test_concurrent_appends_keep_arrival_order(clock):
	conversations = ConversationStore(clock=clock)
	messages = MessageStore(conversations, clock=clock)

	sent = await asyncio.gather(*(messages.append("alice", "bob", f"m{idx}") for idx in range(20)))
	conversation = await conversations.get("alice_bob")

	assert [m.seq for m in sent] == list(range(1, 21))
	assert conversation.last_message.seq == 20
	assert conversation.last_activity == conversation.last_message.timestamp
	assert len({m.message_id for m in sent}) == 20


@pytest.mark.asyncio
async def test_list_for_orders_by_last_activity(clock):
	conversations = ConversationStore(clock=clock)
	messages = MessageStore(conversations, clock=clock)

	await messages.append("alice", "bob", "first")
	await messages.append("alice", "carol", "second")
	await messages.append("dave", "erin", "unrelated")
	await messages.append("bob", "alice", "third")

	listed = await conversations.list_for("alice")

	assert [c.conversation_id for c in listed] == ["alice_bob", "alice_carol"]
	activities = [c.last_activity for c in listed]
	assert activities == sorted(activities, reverse=True)


@pytest.mark.asyncio
async def test_mark_read_only_flips_messages_for_reader(clock):
	conversations = ConversationStore(clock=clock)
	messages = MessageStore(conversations, clock=clock)
	await messages.append("alice", "bob", "hi")
	await messages.append("bob", "alice", "hey")
	await messages.append("bob", "alice", "you there?")

	assert await messages.count_unread("alice_bob", "alice") == 2
	assert await messages.mark_read("alice_bob", "alice") == 2
	assert await messages.mark_read("alice_bob", "alice") == 0
	assert await messages.count_unread("alice_bob", "bob") == 1


@pytest.mark.asyncio
async def test_messages_are_immutable_apart_from_read_state(clock):
	conversations = ConversationStore(clock=clock)
	messages = MessageStore(conversations, clock=clock)
	sent = await messages.append("bob", "alice", "hey")

	with pytest.raises(dataclasses.FrozenInstanceError):
		sent.content = "edited"

	assert await messages.mark_read("alice_bob", "alice") == 1
	stored = (await messages.list_messages("alice_bob"))[0]
	conversation = await conversations.get("alice_bob")

	assert stored.message_id == sent.message_id
	assert stored.content == "hey"
	assert stored.read is True
	assert conversation.last_message.read is True
	assert conversation.last_activity == sent.timestamp


@pytest.mark.asyncio
async def test_page_slices_oldest_first(clock):
	conversations = ConversationStore(clock=clock)
	messages = MessageStore(conversations, clock=clock)
	for idx in range(5):
		await messages.append("alice", "bob", f"m{idx}")

	page = await messages.page("alice_bob", limit=2, offset=2)

	assert [m.content for m in page.messages] == ["m2", "m3"]
	assert page.total == 5
	assert page.has_more is True

	last = await messages.page("alice_bob", limit=2, offset=4)
	assert [m.content for m in last.messages] == ["m4"]
	assert last.has_more is False
