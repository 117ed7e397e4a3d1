"""
Logging utilities for Casefix.

This module provides centralized logging functionality for the application,
including timestamped messages to stderr and an optional log file.
"""

import datetime
import sys
from typing import Optional


# Global log file path (None disables file output)
log_file_path: Optional[str] = "casefix_execution.log"

# Messages below this level are dropped
log_level = "INFO"

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


def is_enabled(level: str) -> bool:
    """Return True if messages at ``level`` pass the current threshold."""
    return LEVELS.get(level, 20) >= LEVELS.get(log_level, 20)


def log_message(message: str, level: str = "INFO"):
    """
    Logs a timestamped message to stderr and the log file, flushing immediately.

    Args:
        message: The message to log
        level: The log level (INFO, ERROR, WARNING, DEBUG)
    """
    if not is_enabled(level):
        return

    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_entry = f"[{timestamp}] [{level}] {message}"
    print(log_entry, file=sys.stderr)

    if not log_file_path:
        return
    try:
        with open(log_file_path, "a", encoding="utf-8") as f:
            f.write(log_entry + "\n")
            f.flush()
    except OSError as e:
        print(f"Error writing to log file {log_file_path}: {e}", file=sys.stderr)
