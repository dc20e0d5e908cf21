"""
Application Initialization
==========================
Parses the command line, configures logging and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging before any other module logs.
2. Creates the QApplication and the application context (ticker + visualizations).
3. Builds the Main Window around that context.

Run with:
    $ flightphysics --log-level DEBUG
    $ python -m flightphysics
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import pyqtgraph as pg

from flightphysics.app.application import create_app
from flightphysics.app.context import AppContext
from flightphysics.logging_config import setup_logging
from flightphysics.view.main_window import MainWindow

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: Optional[Sequence[str]] = None) -> tuple[argparse.Namespace, list[str]]:
    """Split the command line into our options and the arguments left for Qt (e.g. `-platform`)."""
    parser = argparse.ArgumentParser(prog="flightphysics", description="Interactive flight physics visualizations.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="logging verbosity (default: INFO)")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_known_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    args, qt_args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    app = create_app([sys.argv[0], *qt_args])
    context = AppContext()
    win = MainWindow(context)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
