"""Fixed interest and looking-for vocabularies offered to clients."""

from __future__ import annotations

INTERESTS_OPTIONS: tuple[str, ...] = (
	"music",
	"tech",
	"sports",
	"gaming",
	"reading",
	"cooking",
	"travel",
	"movies",
	"fitness",
	"art",
	"photography",
	"dancing",
	"hiking",
	"coding",
	"writing",
	"fashion",
	"nature",
	"yoga",
	"meditation",
	"volunteering",
)

LOOKING_FOR_OPTIONS: tuple[str, ...] = (
	"friendship",
	"romantic relationship",
	"activity partner",
	"study buddy",
	"workout partner",
	"travel companion",
	"professional networking",
	"hobby buddy",
	"mentorship",
	"casual hangouts",
)
