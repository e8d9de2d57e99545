# src/todo_simple/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_tasks
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def emit(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def warn(text: str) -> None:
    """Non-fatal warnings (e.g. a failed save) shown inline, like a warning dialog."""
    emit(f"[WARN] {text}")


def confirm(question: str) -> bool:
    try:
        answer = input(f"{question} [y/N] ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return answer in ("y", "yes")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (file=%s).", state.task_store.path)
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))

    emit(f"[{app_name}] Use /help for commands. Use /exit to quit.")
    print(render_tasks(state.tasks.list(), strike=sys.stdout.isatty()))

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        # Plain text is shorthand for /add.
        if not user_input.startswith("/"):
            user_input = f"/add {user_input}"

        try:
            with state.lock:
                response = command_registry.handle(state, user_input, emit=emit, confirm=confirm)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    logger.info("Console connector finished.")
