# src/planer/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the controller, loads the stored list, then runs
the console loop in the main thread. The remote mirror lives in its own
background thread and is stopped on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_controller
from ..config import get_settings
from ..connectors.console_connector import ConsoleHost, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    # INFO on the console would interleave with the task list; keep it for the file.
    console_level = max(getattr(logging, level_name, logging.INFO), logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logger.info("Starting %s...", settings.app_name)

    host = ConsoleHost()
    controller = create_controller(settings=settings, host=host)

    try:
        controller.start()
        run_console_loop(controller, host)
    finally:
        controller.shutdown()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
