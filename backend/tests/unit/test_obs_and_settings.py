import json
import logging

from companion.obs.logging import JSONLogFormatter, bind_context, reset_context
from companion.settings import Settings


def _record(msg: str, **extra) -> logging.LogRecord:
	record = logging.LogRecord("companion.test", logging.INFO, __file__, 1, msg, None, None)
	for key, value in extra.items():
		setattr(record, key, value)
	return record


def test_formatter_emits_context_and_redacts_message_content():
	tokens = bind_context(request_id="req-1", route="/api/messages/alice")
	try:
		line = JSONLogFormatter().format(
			_record("chat_message_sent", conversation_id="alice_bob", content="secret words")
		)
	finally:
		reset_context(tokens)

	payload = json.loads(line)
	assert payload["msg"] == "chat_message_sent"
	assert payload["level"] == "info"
	assert payload["request_id"] == "req-1"
	assert payload["conversation_id"] == "alice_bob"
	assert payload["content"] == "[redacted]"


def test_settings_read_environment(monkeypatch):
	monkeypatch.delenv("ENV", raising=False)
	monkeypatch.delenv("ENVIRONMENT", raising=False)
	monkeypatch.setenv("APP_ENV", "development")
	monkeypatch.setenv("LOG_LEVEL", "debug")
	monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
	monkeypatch.setenv("CHAT_PAGE_DEFAULT_LIMIT", "25")

	settings = Settings()

	assert settings.is_dev()
	assert settings.obs_log_level == "DEBUG"
	assert settings.cors_allow_origins == ("https://a.example", "https://b.example")
	assert settings.chat_page_default_limit == 25
	assert settings.chat_compute_unread_counts is False
