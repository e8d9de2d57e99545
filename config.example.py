# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file,
see .env.example). This file lists what is read and the defaults.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Logging level for the log file (default: INFO). Console shows WARNING+.",
    "TODO_LOG_TO_FILE": "Write todo.log under TODO_LOG_DIR (true/false, default: true).",
    # Paths
    "TODO_DATA_DIR": "Local data dir (default: ~/.todo_simple).",
    "TODO_TASKS_PATH": "Task file (default: <TODO_DATA_DIR>/tasks.txt).",
    "TODO_LOG_DIR": "Log dir (default: <TODO_DATA_DIR>).",
}
