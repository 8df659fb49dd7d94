# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "argrouter"
    program = shutil.which(script)
    if program:
        return os.path.basename(program)
    if script.endswith(".py"):
        return f"python {script}"
    return os.path.basename(script)


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(
        marker in content for marker in ("docker", "kubepods", "containerd", "podman")
    )


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure logging for Argrouter with CLI-friendly or structured JSON output.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `ARGROUTER_LOG_MODE` environment
            variable or fall back based on container detection.
        log_filename (str | None):
            Path of a log file to also write to. No file logging when omitted.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("ARGROUTER_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logging.getLogger("markdown_it").setLevel(logging.WARNING)

    logger = logging.getLogger("argrouter")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
