import logging

from sqlbuilder.logging.filters import (
    ContextFilter,
    clear_request_context,
    dialect_scope,
    set_logging_context,
    set_request_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="sample",
        args=(),
        exc_info=None,
    )


def test_context_filter_respects_static_environment():
    set_logging_context(environment="qa", extra={"region": "us-east"})
    record = _record()
    assert ContextFilter().filter(record)
    assert getattr(record, "environment") == "qa"
    assert getattr(record, "region") == "us-east"


def test_context_filter_uses_request_context():
    set_request_context(request_id="req-1")
    try:
        record = _record()
        assert ContextFilter().filter(record)
        assert record.request_id == "req-1"
    finally:
        clear_request_context()


def test_context_filter_no_config_is_graceful():
    record = _record()
    assert ContextFilter().filter(record)
    assert not hasattr(record, "environment")
    assert record.request_id is None
    assert record.dialect is None
    assert record.sdk_name == "sqlbuilder"


def test_dialect_scope_tags_and_resets():
    with dialect_scope("oracle"):
        inside = _record()
        ContextFilter().filter(inside)

    outside = _record()
    ContextFilter().filter(outside)

    assert inside.dialect == "oracle"
    assert outside.dialect is None


def test_explicit_dialect_on_record_is_kept():
    record = _record()
    record.dialect = "mysql"
    with dialect_scope("oracle"):
        ContextFilter().filter(record)
    assert record.dialect == "mysql"
