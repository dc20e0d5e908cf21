"""
Test Suite: Command Line
========================
Our own options are parsed, everything else is left for Qt.
"""
from flightphysics.main import parse_args


class TestParseArgs:

    def test_defaults(self):
        args, qt_args = parse_args([])
        assert args.log_level == "INFO"
        assert args.log_file is None
        assert qt_args == []

    def test_qt_arguments_pass_through(self):
        args, qt_args = parse_args(["--log-level", "DEBUG", "-platform", "offscreen"])
        assert args.log_level == "DEBUG"
        assert qt_args == ["-platform", "offscreen"]
