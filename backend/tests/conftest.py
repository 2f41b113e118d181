import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from companion.container import build_container
from companion.domain.identity.models import Profile
from companion.main import create_app
from companion.settings import Settings


class TickingClock:
	"""Deterministic clock advancing one second per reading."""

	def __init__(self, start: datetime | None = None) -> None:
		self.current = start or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

	def __call__(self) -> datetime:
		value = self.current
		self.current = value + timedelta(seconds=1)
		return value


def make_profile(name: str, interests, **extra) -> Profile:
	return Profile(
		identifier=name.strip().lower(),
		name=name,
		age=extra.pop("age", 25),
		interests=tuple(interests),
		**extra,
	)


@pytest.fixture
def profile_factory():
	return make_profile


@pytest.fixture
def test_settings() -> Settings:
	return Settings(environment="dev", obs_log_sampling_rate_info=0.0)


@pytest.fixture
def clock() -> TickingClock:
	return TickingClock()


@pytest.fixture
def container(test_settings, clock):
	return build_container(test_settings, clock=clock)


@pytest_asyncio.fixture
async def seeded(container):
	for profile in (
		make_profile("Alice", ["music", "tech", "art"]),
		make_profile("Bob", ["music", "tech", "travel"]),
		make_profile("Carol", ["cooking", "yoga"]),
	):
		await container.directory.add(profile)
	return container


@pytest_asyncio.fixture
async def api_client(container, test_settings):
	app = create_app(test_settings, container=container)
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
