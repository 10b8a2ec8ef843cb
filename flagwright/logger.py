# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Flagwright."""
import logging

logger: logging.Logger = logging.getLogger("flagwright")
