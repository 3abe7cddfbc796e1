import json
import logging
import sys

from catalog_api.core.logging.formatters import ColorFormatter, JsonFormatter


def make_record():
    return logging.LogRecord("catalog_api", logging.INFO, __file__, 10, "hello %s", ("tester",), None)


def test_json_formatter_basic_fields():
    rec = make_record()
    rec.entity = "Analyst"
    rec.request_id = "req-1"

    data = json.loads(JsonFormatter(env="testing", service="svc").format(rec))

    assert data["message"] == "hello tester"
    assert data["level"] == "INFO"
    assert data["logger"] == "catalog_api"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert data["request_id"] == "req-1"
    assert data["entity"] == "Analyst"
    assert "timestamp" in data
    assert "version" in data


def test_json_formatter_skips_standard_attributes():
    data = json.loads(JsonFormatter(env="testing").format(make_record()))

    for attr in ("args", "msg", "levelno", "thread", "processName"):
        assert attr not in data


def test_json_formatter_non_serializable_extra():
    class X:
        def __repr__(self):
            return "<X>"

    rec = make_record()
    rec.obj = X()

    data = json.loads(JsonFormatter(env="dev", service="svc").format(rec))

    assert data["obj"] == "<X>"


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        rec = logging.LogRecord("catalog_api", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    data = json.loads(JsonFormatter(env="dev").format(rec))

    assert "ValueError: boom" in data["exc_info"]


def test_color_formatter_line():
    rec = make_record()
    rec.request_id = "req-9"

    line = ColorFormatter().format(rec)

    assert "hello tester" in line
    assert "req-9" in line
    assert "INFO" in line
