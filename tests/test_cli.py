"""Tests for the command-line entry point and logging setup."""

import io
import logging

import pytest

from tactics.__main__ import _build_parser, _run_cli
from tactics.utils.logging import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParser:
    def test_cli_defaults(self):
        args = _build_parser().parse_args(["cli"])
        assert (args.seed, args.ticks, args.dt, args.log_level) == (42, 40, 0.25, "INFO")

    def test_serve_options(self):
        args = _build_parser().parse_args(["serve", "--port", "9000", "--log-level", "DEBUG"])
        assert args.command == "serve"
        assert args.port == 9000

    def test_rejects_unknown_level(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["cli", "--log-level", "LOUD"])


class TestLogging:
    def test_setup_logging_routes_to_stream(self, restore_root_logger):
        buf = io.StringIO()
        setup_logging("WARNING", stream=buf)
        logging.getLogger("tactics.test").info("hidden")
        logging.getLogger("tactics.test").warning("shown")
        out = buf.getvalue()
        assert "shown" in out
        assert "hidden" not in out


class TestRunCli:
    def test_demo_encounter_runs(self, restore_root_logger, capsys):
        args = _build_parser().parse_args(["cli", "--ticks", "6", "--seed", "3"])
        _run_cli(args)
        out = capsys.readouterr().out
        assert "Demo encounter: 6 ticks" in out
        assert "Boss shifts" not in out
        assert "Done. Boss hp=288" in out
