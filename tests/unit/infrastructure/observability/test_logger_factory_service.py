import logging

import structlog

from gitlab_changelog.infrastructure.observability.logger_factory_service import (
    HTTP_LOGGERS,
    LoggerFactoryService,
    configure_logging,
)
from gitlab_changelog.infrastructure.observability.redaction_service import REDACTED, RedactionFilter


def _structlog_handlers():
    return [
        handler
        for handler in logging.getLogger().handlers
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
    ]


def test_configure_logging_installs_a_single_structlog_handler():
    configure_logging()
    configure_logging("DEBUG")

    handlers = _structlog_handlers()

    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)


def test_structlog_handler_renders_masked_stdlib_records():
    configure_logging()
    handler = _structlog_handlers()[0]
    record = logging.LogRecord(
        "gitlab_changelog.test", logging.INFO, __file__, 1, "GET %s", ("https://x/?private_token=abc",), None
    )

    assert handler.filter(record)
    rendered = handler.format(record)

    assert "abc" not in rendered
    assert f"private_token={REDACTED}" in rendered


def test_build_logger_returns_filtered_stdlib_logger():
    logger = LoggerFactoryService.build_logger("gitlab_changelog.some_module")

    assert isinstance(logger, logging.Logger)
    assert any(isinstance(f, RedactionFilter) for f in logger.filters)


def test_http_library_loggers_carry_redaction_filter():
    configure_logging()

    for name in HTTP_LOGGERS:
        assert any(isinstance(f, RedactionFilter) for f in logging.getLogger(name).filters)
