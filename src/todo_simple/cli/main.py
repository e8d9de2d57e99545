# src/todo_simple/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console front-end in the
main thread. Every mutation is saved as it happens, so there is nothing to
flush on exit.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, warn
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    # The console is the UI; keep it to warnings, the file gets the rest.
    setup_logging(
        log_dir=settings.log_dir,
        console_level=max(file_level, logging.WARNING),
        file_level=file_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings, on_warning=warn)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
