# src/taskbot/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.bootstrap import save_tasks
from ..core.parser import parse_command
from ..core.state import AppState
from ..errors import StorageWriteError

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def _print_block(text: str) -> None:
    print(DIVIDER)
    print(text)
    print(DIVIDER)


def run_console_loop(state: AppState) -> bool:
    """
    Read-eval-print loop over stdin.

    Returns True when the session ended with the exit command, False on end
    of input (EOF / Ctrl+C).
    """
    logger.info("Console connector started (tasks=%d).", state.tasks.size())
    app_name = str(getattr(state.settings, "app_name", "taskbot"))
    autosave = bool(getattr(state.settings, "autosave", False))

    _print_block(state.ui.render_greeting(app_name))

    while True:
        try:
            line = input()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            return False
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            return False

        command = parse_command(line)
        try:
            reply = command.execute(state.tasks, state.ui, state.storage)
        except Exception:
            logger.exception("Command %s crashed.", type(command).__name__)
            reply = state.ui.render_error("Internal error while handling a command.")

        if autosave and command.mutates:
            try:
                save_tasks(state)
            except StorageWriteError as e:
                logger.error("Autosave failed: %s", e, exc_info=True)
                reply += "\n" + state.ui.render_error(f"Could not save your tasks: {e}")

        _print_block(reply)

        if command.is_exit:
            logger.info("Console exit command received.")
            return True
