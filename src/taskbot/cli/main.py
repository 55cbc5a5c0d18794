# src/taskbot/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, save_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import StorageWriteError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_file=settings.log_file, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    exited = run_console_loop(state)
    if not exited:
        # End of input without "bye": keep the session's work anyway.
        try:
            save_tasks(state)
        except StorageWriteError as e:
            logger.error("Failed to save tasks at end of input: %s", e, exc_info=True)
            print(state.ui.render_error(f"Could not save your tasks: {e}"))

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
