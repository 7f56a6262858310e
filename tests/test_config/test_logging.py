"""Testes abrangentes para config.logging.

Cobre: configure_logging, get_logger, log_phase_outcome,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_phase_outcome,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _make_record(name: str = "test", level: int = logging.INFO, msg: str = "msg"):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO

    def test_configure_logging_is_case_insensitive(self) -> None:
        """Nível é aceito em minúsculas."""
        configure_logging(level="warning")
        root = logging.getLogger()
        assert root.level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_with_correlation_id_getter(self) -> None:
        """Handler recebe CorrelationIdFilter."""
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_constants(self) -> None:
        """VALID_LOG_LEVELS e DEFAULT_SERVICE_NAME estão definidos."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "publicador_midia"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        """Mesmo nome retorna mesma instância."""
        logger1 = get_logger("same.module")
        logger2 = get_logger("same.module")
        assert isinstance(logger1, logging.Logger)
        assert logger1 is logger2


class TestLogPhaseOutcome:
    """Testes para log_phase_outcome."""

    def test_ok_outcome_logs_info(self) -> None:
        """Desfecho ok vai para INFO com phase/outcome no extra."""
        logger = MagicMock(spec=logging.Logger)
        log_phase_outcome(logger, "publish", "ok", media_id="m1")

        level, template, phase, outcome = logger.log.call_args[0]
        assert level == logging.INFO
        assert template == "media_publish_%s_%s"
        assert (phase, outcome) == ("publish", "ok")
        extra = logger.log.call_args[1]["extra"]
        assert extra == {"phase": "publish", "outcome": "ok", "media_id": "m1"}

    def test_failed_outcome_logs_warning_with_elapsed(self) -> None:
        """Qualquer desfecho != ok vai para WARNING."""
        logger = MagicMock(spec=logging.Logger)
        log_phase_outcome(logger, "append", "failed", 12.5, segment_index=2)

        assert logger.log.call_args[0][0] == logging.WARNING
        extra = logger.log.call_args[1]["extra"]
        assert extra["elapsed_ms"] == 12.5
        assert extra["segment_index"] == 2

    def test_without_elapsed_ms(self) -> None:
        """elapsed_ms ausente não aparece no extra."""
        logger = MagicMock(spec=logging.Logger)
        log_phase_outcome(logger, "poll", "attempts_exhausted")
        assert "elapsed_ms" not in logger.log.call_args[1]["extra"]


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        """Filter adiciona correlation_id do getter."""
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _make_record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """Filter preserva correlation_id passado via extra."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _make_record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        """Filter usa string vazia quando não há getter."""
        filter_ = CorrelationIdFilter("service_name")
        record = _make_record()
        filter_.filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        """REQUIRED_LOG_FIELDS contém campos obrigatórios."""
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert expected == set(REQUIRED_LOG_FIELDS)

    def test_field_rename_map_content(self) -> None:
        """FIELD_RENAME_MAP mapeia campos corretamente."""
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        """Output é JSON com campos renomeados e extras."""
        formatter = create_json_formatter()
        record = _make_record(name="app.services.upload_session", msg="media_init_ok")
        record.correlation_id = "abc-123"
        record.service = "publicador_midia"
        record.media_id = "1880028106020515840"

        output = json.loads(formatter.format(record))

        assert output["message"] == "media_init_ok"
        assert output["logger"] == "app.services.upload_session"
        assert output["level"] == "INFO"
        assert output["correlation_id"] == "abc-123"
        assert output["media_id"] == "1880028106020515840"
