"""Settings for the companion matcher backend."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_field(default, *env_names: str):
	if env_names:
		alias = AliasChoices(*env_names) if len(env_names) > 1 else env_names[0]
		return Field(default=default, validation_alias=alias)
	return Field(default=default)


class Settings(BaseSettings):
	environment: str = _env_field("production", "ENV", "APP_ENV", "ENVIRONMENT")
	service_name: str = _env_field("companion-api", "SERVICE_NAME")
	git_commit: str = _env_field("unknown", "GIT_COMMIT", "COMMIT_SHA", "SOURCE_VERSION")

	obs_enabled: bool = _env_field(True, "OBS_ENABLED")
	obs_metrics_public: bool = _env_field(True, "OBS_METRICS_PUBLIC")
	obs_log_level: str = _env_field("INFO", "LOG_LEVEL")
	obs_log_sampling_rate_info: float = _env_field(1.0, "LOG_SAMPLING_RATE_INFO")
	obs_admin_token: Optional[str] = _env_field(None, "OBS_ADMIN_TOKEN")

	cors_allow_origins: Any = _env_field((), "CORS_ALLOW_ORIGINS")

	# Message history paging; limit falls back to the default when unusable
	chat_page_default_limit: int = _env_field(50, "CHAT_PAGE_DEFAULT_LIMIT")
	chat_page_max_limit: int = _env_field(200, "CHAT_PAGE_MAX_LIMIT")
	chat_message_max_length: int = _env_field(4000, "CHAT_MESSAGE_MAX_LENGTH")
	# Off: conversation listings report unreadCount=0 like the original clients expect
	chat_compute_unread_counts: bool = _env_field(False, "CHAT_COMPUTE_UNREAD_COUNTS")

	model_config = SettingsConfigDict(
		env_prefix="",
		env_file=".env",
		case_sensitive=False,
		populate_by_name=True,
		extra="ignore",
	)

	def is_prod(self) -> bool:
		return self.environment.lower() in ("prod", "production", "live")

	def is_dev(self) -> bool:
		return self.environment.lower() in ("dev", "development")

	@field_validator("cors_allow_origins", mode="before")
	@classmethod
	def _split_cors(cls, value):
		if value in (None, ""):
			return ()
		if isinstance(value, str):
			return tuple(part.strip() for part in value.split(",") if part.strip())
		if isinstance(value, (list, tuple, set)):
			return tuple(str(item).strip() for item in value if str(item).strip())
		return ()

	@field_validator("obs_log_level", mode="after")
	@classmethod
	def _normalise_level(cls, value: str) -> str:
		return value.upper()


settings = Settings()
