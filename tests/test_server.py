"""
Tests for the command-line entry point.

Only option parsing is tested; starting a transport is left to
integration runs.
"""

from chuk_mcp_glyphs import server
from chuk_mcp_glyphs.config import Settings


class TestBuildParser:
    """Tests for build_parser."""

    def test_defaults(self):
        """Stdio transport, port from settings."""
        args = server.build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == server.settings.PORT
        assert args.debug is False

    def test_port_from_settings(self, monkeypatch):
        """The PORT setting flows into the --port default."""
        monkeypatch.setenv("PORT", "9200")
        monkeypatch.setattr(server, "settings", Settings())
        assert server.build_parser().parse_args([]).port == 9200

    def test_port_flag_wins(self, monkeypatch):
        """An explicit --port overrides the setting."""
        monkeypatch.setenv("PORT", "9200")
        monkeypatch.setattr(server, "settings", Settings())
        args = server.build_parser().parse_args(["--transport", "http", "--port", "8123"])
        assert args.transport == "http"
        assert args.port == 8123
