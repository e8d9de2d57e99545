"""Single-user task list: flat-file store, in-memory ordering engine, console front-end."""

__version__ = "0.1.0"
