"""Testes para kick_api.config.logging.

Cobre: configure_logging, log_fallback, CorrelationIdFilter,
create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from kick_api.config.logging import (
    DEFAULT_SERVICE_NAME,
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    VALID_LOG_LEVELS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    log_fallback,
)
from kick_api.config.settings import get_kick_settings
from kick_api.observability import reset_correlation_id, set_correlation_id


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="kick_api.test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("KICK_LOG_LEVEL", raising=False)
    get_kick_settings.cache_clear()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    get_kick_settings.cache_clear()


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_default_level_comes_from_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Sem nível explícito, usa KICK_LOG_LEVEL via KickSettings."""
        monkeypatch.setenv("KICK_LOG_LEVEL", "warning")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_explicit_level_overrides_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KICK_LOG_LEVEL", "ERROR")
        configure_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.parametrize("level", ["debug", "WARNING", "Error", "CRITICAL"])
    def test_level_is_case_insensitive(self, level: str) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == getattr(logging, level.upper())

    def test_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers(self) -> None:
        """configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_default_getter_reads_context(self) -> None:
        """Sem getter explícito, usa o correlation_id do contexto."""
        configure_logging()
        filter_ = next(
            f
            for f in logging.getLogger().handlers[0].filters
            if isinstance(f, CorrelationIdFilter)
        )
        token = set_correlation_id("webhook-msg-1")
        try:
            record = _record()
            filter_.filter(record)
        finally:
            reset_correlation_id(token)
        assert record.correlation_id == "webhook-msg-1"
        assert record.service == DEFAULT_SERVICE_NAME

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "kick_api"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "webhook_signature")
        call_args = logger.info.call_args
        # Formato lazy: template + componente
        assert call_args[0] == ("Fallback applied for %s", "webhook_signature")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "component": "webhook_signature"}

    def test_with_reason(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "webhook_signature", reason="public_key_refetch")
        assert logger.info.call_args[1]["extra"]["reason"] == "public_key_refetch"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_preserves_explicit_correlation_id(self) -> None:
        """Filter preserva correlation_id passado via extra."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name")
        record = _record(level=logging.ERROR)
        filter_.filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_fields(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_extras(self) -> None:
        formatter = create_json_formatter()
        record = _record("kick_request_completed")
        record.correlation_id = "abc-123"
        record.service = "kick_api"
        record.status_code = 200

        output = json.loads(formatter.format(record))

        assert output["message"] == "kick_request_completed"
        assert output["logger"] == "kick_api.test"
        assert output["level"] == "INFO"
        assert output["correlation_id"] == "abc-123"
        assert output["status_code"] == 200
