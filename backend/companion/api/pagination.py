from __future__ import annotations

from typing import Tuple


def _parse_int(value: str | int | None) -> int | None:
	if value is None or isinstance(value, bool):
		return None
	if isinstance(value, int):
		return value
	try:
		return int(str(value).strip())
	except ValueError:
		return None


def clamp_window(
	limit: str | int | None,
	offset: str | int | None,
	*,
	default_limit: int,
	max_limit: int,
) -> Tuple[int, int]:
	"""Turn raw limit/offset query values into a usable slice window.

	Missing, non-numeric or non-positive limits fall back to ``default_limit``;
	oversized ones are capped at ``max_limit``. Offsets default to 0 and never go
	negative.
	"""
	parsed_limit = _parse_int(limit)
	if parsed_limit is None or parsed_limit < 1:
		parsed_limit = default_limit
	parsed_limit = min(parsed_limit, max_limit)
	parsed_offset = _parse_int(offset)
	if parsed_offset is None or parsed_offset < 0:
		parsed_offset = 0
	return parsed_limit, parsed_offset
