"""Tests for the application entry point."""

import io
import logging
import os
import tempfile

import pytest
import structlog

from dns_cache_table import main as main_module
from dns_cache_table.dns_logging import logger as logger_module
from dns_cache_table.main import DNSCacheApp, build_parser, main


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Keep environment overrides out and restore logging after each test."""
    for key in list(os.environ):
        if key.startswith("DNS_CACHE_"):
            monkeypatch.delenv(key)

    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    structlog.reset_defaults()
    logger_module._logger_instance = None


class TestArgumentParser:
    """Test command line parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.seed is None
        assert args.generate == 0
        assert args.stats is False

    def test_options(self):
        args = build_parser().parse_args(
            ["-c", "cache.yaml", "--seed", "5", "--generate", "20", "--stats"]
        )
        assert args.config == "cache.yaml"
        assert args.seed == 5
        assert args.generate == 20
        assert args.stats is True


class TestDNSCacheApp:
    """Test application wiring."""

    def test_initialize_defaults(self):
        app = DNSCacheApp()
        app.initialize()

        assert app.table.table_size == 50
        assert app.generator is not None
        assert app.logger is not None

    def test_initialize_from_config_file(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("cache:\n  table_size: 11\ngenerator:\n  seed: 8\n")
            config_file = f.name

        try:
            app = DNSCacheApp(config_file)
            app.initialize()
            assert app.table.table_size == 11
            assert app.generator.seed == 8
        finally:
            os.unlink(config_file)

    def test_seed_argument_overrides_config(self):
        app = DNSCacheApp(seed=123)
        app.initialize()
        assert app.generator.seed == 123

    def test_same_seed_same_table(self):
        first = DNSCacheApp(seed=9)
        first.initialize()
        first.generate(15)

        second = DNSCacheApp(seed=9)
        second.initialize()
        second.generate(15)

        assert [
            (i, [e.domain for e in entries]) for i, entries in first.table.all_entries()
        ] == [
            (i, [e.domain for e in entries]) for i, entries in second.table.all_entries()
        ]

    def test_run_menu_clears_table_on_exit(self):
        output = io.StringIO()
        app = DNSCacheApp(input_stream=io.StringIO("9\n5\n8\n0\n"), output_stream=output)
        app.initialize()
        app.run_menu()

        assert "Generated 5 test entries." in output.getvalue()
        assert "Total entries:" in output.getvalue()
        assert len(app.table) == 0


class TestMain:
    """Test the main function."""

    def test_stats_mode(self, capsys):
        assert main(["--stats", "--generate", "5", "--seed", "1"]) == 0

        out = capsys.readouterr().out
        assert "Buckets: 50" in out
        assert "Load factor:" in out

    def test_missing_config_file(self, capsys):
        assert main(["--config", "/non/existent/cache.yaml", "--stats"]) == 1
        assert "Failed to start DNS cache" in capsys.readouterr().err

    def test_invalid_config(self, capsys):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("cache:\n  table_size: -1\n")
            config_file = f.name

        try:
            assert main(["--config", config_file, "--stats"]) == 1
        finally:
            os.unlink(config_file)

    def test_menu_mode(self, monkeypatch, capsys):
        monkeypatch.setattr(main_module.sys, "stdin", io.StringIO("8\n0\n"))
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "=== DNS Cache System ===" in out
        assert "Goodbye." in out
