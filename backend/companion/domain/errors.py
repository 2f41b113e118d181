"""Domain-level exceptions shared by the directory, matching and chat services."""

from __future__ import annotations


class DomainError(Exception):
	"""Base class for errors recovered at the HTTP boundary."""

	reason: str = "unknown"
	status_code: int = 500
	default_message: str = "Internal server error"

	def __init__(self, message: str | None = None, *, reason: str | None = None) -> None:
		self.message = message or self.default_message
		super().__init__(self.message)
		if reason:
			self.reason = reason


class BadRequest(DomainError):
	reason = "bad_request"
	status_code = 400
	default_message = "Bad request"


class InvalidPair(BadRequest):
	reason = "invalid_pair"
	default_message = "A conversation needs two distinct participants"


class SelfMessageError(BadRequest):
	reason = "self_message"
	default_message = "Cannot send message to yourself"


class Forbidden(DomainError):
	reason = "forbidden"
	status_code = 403
	default_message = "Access denied"


class NotFound(DomainError):
	reason = "not_found"
	status_code = 404
	default_message = "Not found"


class Conflict(DomainError):
	reason = "conflict"
	status_code = 409
	default_message = "Conflict"


class InternalError(DomainError):
	reason = "internal_error"
	status_code = 500


__all__ = [
	"BadRequest",
	"Conflict",
	"DomainError",
	"Forbidden",
	"InternalError",
	"InvalidPair",
	"NotFound",
	"SelfMessageError",
]
