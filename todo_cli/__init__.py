"""Command-line todo list with built-in and custom categories."""

__version__ = "0.1.0"
