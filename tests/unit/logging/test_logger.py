import json
import logging
from uuid import uuid4

import pytest

from chronicle.logging import (
    ChronicleLogger,
    LoggerProtocol,
    LoggingSettings,
    LogLevel,
    StructuredFormatter,
    get_logger,
)


def make_record(msg="msg", level=logging.INFO, context=None):
    record = logging.LogRecord(
        name="chronicle.test", level=level, pathname="", lineno=0, msg=msg, args=(), exc_info=None
    )
    if context is not None:
        record.chronicle_context = context
    return record


@pytest.fixture
def logger_name():
    return f"chronicle.test.{uuid4().hex}"


def test_structured_formatter_plain_with_context():
    fmt = StructuredFormatter(json_format=False, include_timestamp=False, include_level=True)
    formatted = fmt.format(make_record("appended", context={"stream_id": "order/1", "count": 2}))
    assert formatted == "appended [INFO] stream_id=order/1 count=2"


def test_structured_formatter_quotes_strings_with_spaces():
    fmt = StructuredFormatter(json_format=False, include_timestamp=False, include_level=False)
    formatted = fmt.format(make_record("msg", context={"reason": "two words"}))
    assert formatted == 'msg reason="two words"'


def test_structured_formatter_json():
    fmt = StructuredFormatter(json_format=True, include_timestamp=False, include_level=True)
    formatted = fmt.format(make_record("msg", context={"event_type": int, "version": 3}))
    data = json.loads(formatted)
    assert data["message"] == "msg"
    assert data["level"] == "INFO"
    assert data["event_type"] == "int"
    assert data["version"] == 3
    assert "timestamp" not in data


def test_structured_formatter_plain_timestamp():
    fmt = StructuredFormatter(json_format=False, include_timestamp=True, include_level=True)
    formatted = fmt.format(make_record("plain"))
    assert "plain" in formatted
    assert "INFO" in formatted
    assert "-" in formatted


def test_logger_writes_structured_console_output(capsys, logger_name):
    settings = LoggingSettings(level="DEBUG", include_timestamp=False)
    logger = ChronicleLogger(logger_name, settings=settings)
    logger.debug("Aggregate replayed", identifier="order/1", version=4)
    out = capsys.readouterr().out
    assert "Aggregate replayed [DEBUG] identifier=order/1 version=4" in out


def test_logger_respects_level(capsys, logger_name):
    settings = LoggingSettings(level="WARNING", include_timestamp=False)
    logger = ChronicleLogger(logger_name, settings=settings)
    logger.info("hidden")
    logger.warning("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_set_level(capsys, logger_name):
    settings = LoggingSettings(level="ERROR", include_timestamp=False)
    logger = ChronicleLogger(logger_name, settings=settings)
    logger.set_level(LogLevel.DEBUG)
    logger.debug("now visible")
    assert "now visible" in capsys.readouterr().out


def test_bind_adds_context(capsys, logger_name):
    settings = LoggingSettings(level="INFO", include_timestamp=False, include_level=False)
    logger = ChronicleLogger(logger_name, settings=settings)
    bound = logger.bind(request_id="r1")
    bound.info("handled", step=1)
    logger.info("plain")
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "handled request_id=r1 step=1"
    assert out[1] == "plain"


def test_context_manager_adds_context(capsys, logger_name):
    settings = LoggingSettings(level="INFO", include_timestamp=False, include_level=False)
    logger = ChronicleLogger(logger_name, settings=settings)
    with logger.context(transaction="t1"):
        logger.info("inside")
    logger.info("outside")
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "inside transaction=t1"
    assert out[1] == "outside"


def test_file_handler(tmp_path, logger_name):
    log_file = tmp_path / "chronicle.log"
    settings = LoggingSettings(
        console_enabled=False, file_enabled=True, file_path=str(log_file), json_format=True
    )
    logger = ChronicleLogger(logger_name, settings=settings)
    logger.error("failed", stream_id="s")
    for handler in logging.getLogger(logger_name).handlers:
        handler.flush()
    data = json.loads(log_file.read_text().strip())
    assert data["message"] == "failed"
    assert data["stream_id"] == "s"
    assert data["level"] == "ERROR"


def test_reconfigure_replaces_handlers(logger_name):
    settings = LoggingSettings(include_timestamp=False)
    ChronicleLogger(logger_name, settings=settings)
    ChronicleLogger(logger_name, settings=settings)
    assert len(logging.getLogger(logger_name).handlers) == 1


def test_reconfigure_closes_removed_file_handlers(tmp_path, logger_name):
    settings = LoggingSettings(
        console_enabled=False, file_enabled=True, file_path=str(tmp_path / "chronicle.log")
    )
    first = ChronicleLogger(logger_name, settings=settings)
    (old_handler,) = logging.getLogger(logger_name).handlers
    for _ in range(4):
        ChronicleLogger(logger_name, settings=settings)
    first.info("still written")
    handlers = logging.getLogger(logger_name).handlers
    assert len(handlers) == 1
    assert handlers[0] is not old_handler
    assert old_handler.stream is None


def test_get_logger_level_override(logger_name):
    logger = get_logger(logger_name, level=LogLevel.DEBUG, settings=LoggingSettings(level="ERROR"))
    assert isinstance(logger, ChronicleLogger)
    assert logging.getLogger(logger_name).level == logging.DEBUG


def test_logger_satisfies_protocol(logger_name):
    logger: LoggerProtocol = get_logger(logger_name)
    for method in ("debug", "info", "warning", "error", "critical", "bind"):
        assert callable(getattr(logger, method))
