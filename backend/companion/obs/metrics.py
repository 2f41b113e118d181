"""Central registry for Prometheus metrics used across the backend."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNTER = Counter(
	"companion_http_requests_total",
	"Total HTTP requests processed",
	["route", "method", "status"],
)

REQUEST_LATENCY = Histogram(
	"companion_http_request_duration_seconds",
	"HTTP request latency in seconds",
	["route", "method"],
	buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0),
)

CHAT_SEND = Counter(
	"companion_chat_send_total",
	"Chat messages sent",
)

CHAT_READ_UPDATES = Counter(
	"companion_chat_read_updates_total",
	"Chat messages flipped to read",
)

PROFILES_CREATED = Counter(
	"companion_profiles_created_total",
	"Profiles added to the directory",
)

MATCH_QUERIES = Counter(
	"companion_match_queries_total",
	"Match computations served",
)

MATCH_CANDIDATES = Histogram(
	"companion_match_candidates",
	"Candidates returned per match computation",
	buckets=(0, 1, 2, 5, 10, 25, 50, 100, 250),
)

SHORTLIST_ADDS = Counter(
	"companion_shortlist_adds_total",
	"Shortlist additions",
)

DOMAIN_ERRORS = Counter(
	"companion_domain_errors_total",
	"Domain errors translated at the HTTP boundary",
	["reason"],
)


def observe_request(route: str, method: str, status: int, elapsed_seconds: float) -> None:
	REQUEST_COUNTER.labels(route=route, method=method, status=str(status)).inc()
	REQUEST_LATENCY.labels(route=route, method=method).observe(elapsed_seconds)


def inc_chat_send() -> None:
	CHAT_SEND.inc()


def inc_chat_read(count: int = 1) -> None:
	if count > 0:
		CHAT_READ_UPDATES.inc(count)


def inc_profile_created() -> None:
	PROFILES_CREATED.inc()


def observe_match_query(candidates: int) -> None:
	MATCH_QUERIES.inc()
	MATCH_CANDIDATES.observe(candidates)


def inc_shortlist_add() -> None:
	SHORTLIST_ADDS.inc()


def inc_domain_error(reason: str) -> None:
	DOMAIN_ERRORS.labels(reason=reason).inc()
