import pytest

from companion.domain.errors import BadRequest, NotFound


@pytest.mark.asyncio
async def test_shortlist_keeps_insertion_order_without_duplicates(seeded):
	registry = seeded.shortlist
	await registry.add("alice", "Carol")
	await registry.add("ALICE", "bob")
	await registry.add("alice", "carol")

	profiles = await registry.list("alice")

	assert [p.identifier for p in profiles] == ["carol", "bob"]


@pytest.mark.asyncio
async def test_shortlist_validation(seeded):
	registry = seeded.shortlist
	with pytest.raises(BadRequest):
		await registry.add("alice", "")
	with pytest.raises(NotFound):
		await registry.add("alice", "zoe")
	with pytest.raises(BadRequest):
		await registry.add("alice", "Alice")


@pytest.mark.asyncio
async def test_shortlist_for_unknown_user_is_empty(seeded):
	assert await seeded.shortlist.list("zoe") == []
