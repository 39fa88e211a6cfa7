"""
Application Initialization
==========================
Builds the engine and the main window and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Configures logging (console, optionally a file).
2. Creates the QApplication.
3. Builds the demo scene inside a fresh `Engine`.
4. Hands the engine to the main window and starts the frame timer.

Run with: python -m hyperview
"""
from __future__ import annotations

import argparse
import logging
import sys

from hyperview import config
from hyperview.app.application import create_app
from hyperview.app.ui.main_window import MainWindow
from hyperview.engine import Engine
from hyperview.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hyperview", description="Interactive 4D polytope viewer.")
    parser.add_argument("--log-level", default="info", help="Logging level (debug, info, warning, ...).")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    # Qt consumes its own options (e.g. -platform), leave those alone
    args, _ = parser.parse_known_args(argv)
    return args


def main() -> int:
    """Main entry point for the application."""
    args = parse_args(sys.argv[1:])
    setup_logging(level=args.log_level, log_file=args.log_file)

    app = create_app()

    engine = Engine(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
    win = MainWindow(engine)
    win.show()
    win.start()

    logger.info("Application started.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
