"""Unit tests for tenant-aware logging."""
import json
import logging

import pytest

from core.logging import (
    LogContext,
    TenantContextFilter,
    build_formatter,
    reset_tenant,
    set_tenant,
)


class ListHandler(logging.Handler):
    """Collects records for assertions."""

    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def captured():
    handler = ListHandler()
    handler.addFilter(TenantContextFilter())
    logger = logging.getLogger("tests.logging")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger, handler.records
    logger.removeHandler(handler)
    logger.propagate = True


@pytest.mark.unit
class TestLogContext:
    """Test tenant and bound field propagation."""

    def test_tenant_and_bound_fields(self, captured):
        logger, records = captured
        token = set_tenant("biz1")
        try:
            with LogContext(logger, reservation_id="r1") as ctx:
                ctx.log("info", "inside", step="invoice")
            logger.info("outside")
        finally:
            reset_tenant(token)

        assert records[0].tenant_id == "biz1"
        assert records[0].reservation_id == "r1"
        assert records[0].step == "invoice"
        assert not hasattr(records[1], "reservation_id")

    def test_no_tenant_placeholder(self, captured):
        logger, records = captured
        logger.info("anonymous")
        assert records[0].tenant_id == "-"

    def test_exception_logged_and_propagated(self, captured):
        logger, records = captured
        with pytest.raises(ValueError):
            with LogContext(logger, reservation_id="r2"):
                raise ValueError("bad")

        assert records[0].levelno == logging.ERROR
        assert records[0].reservation_id == "r2"
        assert records[0].exc_info is not None

    def test_json_formatter_fields(self, captured):
        logger, records = captured
        token = set_tenant("biz9")
        try:
            logger.warning("hello")
        finally:
            reset_tenant(token)

        payload = json.loads(build_formatter(use_json=True).format(records[0]))

        assert payload["message"] == "hello"
        assert payload["level"] == "WARNING"
        assert payload["tenant_id"] == "biz9"

    def test_plain_formatter_shows_tenant(self, captured):
        logger, records = captured
        logger.info("plain")
        assert "[tenant=-] plain" in build_formatter(use_json=False).format(records[0])
