# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "FLAGWRIGHT_LOG_MODE"
LOG_MODES = ("cli", "json")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def get_program_invocation() -> str:
    """Return how the running program was invoked, for usage lines."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)
    if Path(script).name == "__main__.py":
        return f"python -m {Path(script).parent.name}"
    return f"python {script}" if "python" in sys.executable else script


def running_in_container() -> bool:
    try:
        content = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(_json_formatter())
        return handler
    raise ValueError(f"Invalid log mode: {mode}. Must be one of: {', '.join(LOG_MODES)}")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "flagwright.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure the root logger for programs built with Flagwright.

    The parser only logs at debug level (the tokens it was given, each binding it
    resolves and the final result), so the console stays quiet by default and
    the optional log file carries the trace.

    Args:
        mode (str | None):
            "cli" for Rich console logs or "json" for one JSON object per line.
            Defaults to the `FLAGWRIGHT_LOG_MODE` environment variable, then to
            "json" inside containers and "cli" elsewhere.
        log_filename (str | None):
            Log file path. None disables file logging.
        json_log_to_file (bool):
            Write the log file as JSON instead of plain text.
        file_log_level (int):
            Level of the file handler.
        console_log_level (int):
            Level of the console handler.

    Raises:
        ValueError: If `mode` is not one of "cli" or "json".
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logger = logging.getLogger("flagwright")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
