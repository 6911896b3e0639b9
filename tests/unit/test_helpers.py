"""Tests for small helpers and request context."""

from loguru import logger

from board.helpers import normalize_ip
from board.services.session import ClientSession, RequestContext
from settings.logging import setup_logging


class TestNormalizeIp:
    def test_loopback(self):
        assert normalize_ip("::1") == "127.0.0.1"

    def test_ipv4_mapped(self):
        assert normalize_ip("::ffff:192.168.1.4") == "192.168.1.4"

    def test_passthrough(self):
        assert normalize_ip("2001:db8::1") == "2001:db8::1"
        assert normalize_ip(None) == ""


class TestRequestContext:
    def test_ajax_path(self):
        assert RequestContext(ClientSession(), path="/ajax/notifications").is_ajax

    def test_ajax_header_case_insensitive(self):
        ctx = RequestContext(ClientSession(), headers={"x-requested-with": "xmlhttprequest"})
        assert ctx.is_ajax

    def test_regular_request(self):
        assert not RequestContext(ClientSession(), path="/forums/1").is_ajax

    def test_session_destroy(self):
        session = ClientSession(data={"flash": "hi"})
        session.destroy()
        assert session.destroyed
        assert session.data == {}


class TestLogging:
    def test_file_sinks(self, tmp_path):
        log_dir = tmp_path / "logs"
        try:
            setup_logging(level="debug", to_file=True, log_dir=log_dir)
            logger.debug("request chatter")
            logger.warning("continuity failed")
        finally:
            logger.remove()

        assert list(log_dir.glob("board_*-*.log"))
        warnings = (log_dir / "board_warnings.log").read_text()
        assert "continuity failed" in warnings
        assert "request chatter" not in warnings
