# shop_api/tests/test_logging/test_filters.py
import logging
from shop_api.core.logging.filters import RedactFilter, RequestIdFilter, set_request_id, reset_request_id


def make_record():
    # name, level, pathname, lineno, msg, args, exc_info
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello %s", ("world",), None)


def test_request_id_filter_defaults_to_dash():
    rec = make_record()
    token = set_request_id(None)
    try:
        assert RequestIdFilter().filter(rec) is True
        assert rec.request_id == "-"
    finally:
        reset_request_id(token)


def test_request_id_filter_uses_contextvar():
    rec = make_record()
    token = set_request_id("abc-123")
    try:
        RequestIdFilter().filter(rec)
        assert rec.request_id == "abc-123"
    finally:
        reset_request_id(token)


def test_request_id_filter_respects_record_extra():
    rec = make_record()
    rec.request_id = "explicit"
    token = set_request_id("context-id")
    try:
        RequestIdFilter().filter(rec)
        assert rec.request_id == "explicit"
    finally:
        reset_request_id(token)


def test_redact_filter_masks_sensitive_extras():
    rec = make_record()
    rec.phone = "0909123456"
    rec.Authorization = "Bearer abc"
    rec.error_code = "PHONE_ALREADY_IN_USE"
    assert RedactFilter().filter(rec) is True
    assert rec.phone == "***REDACTED***"
    assert rec.Authorization == "***REDACTED***"
    assert rec.error_code == "PHONE_ALREADY_IN_USE"
