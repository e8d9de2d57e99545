# src/todo_simple/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_api import TaskApi
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Explicit handle for one session.

    Owns the task API (and through it the live collection). Nothing here is
    module-level, so tests can build as many independent states as needed.
    """

    # Settings-like object (config.Settings or a test SimpleNamespace).
    settings: Any

    task_store: TaskStore
    tasks: TaskApi

    # Serializes front-end command handling.
    lock: threading.RLock = field(default_factory=threading.RLock)
