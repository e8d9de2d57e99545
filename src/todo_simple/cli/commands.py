# src/todo_simple/cli/commands.py

from __future__ import annotations

import inspect
import logging
import sys
from collections.abc import Callable, Sequence
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandConfirm = Callable[[str], bool]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler4 = Callable[
    [AppState, list[str], CommandEmitter | None, CommandConfirm | None], str
]
CommandHandler = CommandHandler2 | CommandHandler4

logger = logging.getLogger(__name__)

STRIKE = "\u0336"  # combining long stroke overlay


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # handlers that get the untouched remainder of the line as args[0]
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        names = [key] + [a.lower() for a in aliases]
        for alias in names[1:]:
            self._handlers[alias] = handler
        if raw:
            self._raw.update(names)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
        confirm: CommandConfirm | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if name in self._raw:
            args = [rest] if rest else []
        else:
            args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 4

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, emit, confirm)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def _strike(text: str) -> str:
    return "".join(ch + STRIKE for ch in text)


def render_tasks(tasks: Sequence[Task], *, strike: bool = False) -> str:
    """
    Render the full task table (the front-end always redraws everything).
    Completed rows get strike-through when `strike` is set (TTY output).
    """
    if not tasks:
        return "No tasks yet. Use /add <title> [| <description>]."

    width = max(len(str(t.id)) for t in tasks)
    lines = []
    for t in tasks:
        box = "[x]" if t.completed else "[ ]"
        text = t.title
        if t.description:
            text = f"{text} - {t.description}"
        if t.completed and strike:
            text = _strike(text)
        lines.append(f"  {t.id:>{width}}. {box} {text}")
    return "\n".join(lines)


def _render_state(state: AppState) -> str:
    return render_tasks(state.tasks.list(), strike=sys.stdout.isatty())


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return _render_state(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    raw = args[0] if args else ""
    title, _, description = raw.partition("|")
    try:
        task = state.tasks.create(title, description)
    except ValueError:
        return "Title is required. Usage: /add <title> [| <description>]"
    return f"Added #{task.id}.\n{_render_state(state)}"


def _set_completed(state: AppState, args: list[str], value: bool, usage: str) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return usage
    if not state.tasks.set_completed(task_id, value):
        return f"No task with id {task_id}."
    return _render_state(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, True, "Usage: /done <id>")


def cmd_undo(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, False, "Usage: /undo <id>")


def cmd_delete(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
    confirm: CommandConfirm | None = None,
) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"

    task = state.tasks.get(task_id)
    if task is None:
        return f"No task with id {task_id}."

    if confirm is not None and not confirm(f"Delete: {task.title}?"):
        return "Cancelled."

    if not state.tasks.remove(task_id):
        return f"No task with id {task_id}."
    if emit is not None:
        emit(f"Deleted #{task_id}: {task.title}")
    return _render_state(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    api = state.tasks
    open_count, done_count = api.service.counts()
    loaded = api.load_result
    lines = [
        "Status:",
        f"  File: {state.task_store.path}",
        f"  Open: {open_count}  Done: {done_count}",
        f"  Corrupt lines skipped at load: {loaded.skipped_lines}",
    ]
    if loaded.error:
        lines.append(f"  Load error: {loaded.error}")
    if api.last_save_error:
        lines.append(f"  Last save failed: {api.last_save_error}")
    return "\n".join(lines)


registry.register("help", cmd_help, "show this help")
registry.register("list", cmd_list, "show all tasks", aliases=["ls"])
registry.register("add", cmd_add, "add a task: /add <title> [| <description>]", raw=True)
registry.register("done", cmd_done, "mark a task completed: /done <id>")
registry.register("undo", cmd_undo, "mark a task not completed: /undo <id>")
registry.register("delete", cmd_delete, "delete a task: /delete <id>", aliases=["rm"])
registry.register("status", cmd_status, "show file path and counts")
