from __future__ import annotations
import sys, os, logging, threading
from pathlib import Path
from typing import TypedDict, Optional
from loguru import logger


class LoggingOptions(TypedDict, total=False):
    # formatting toggles
    show_file: bool
    show_function: bool
    show_thread: bool
    # file sink options
    to_file: bool
    file_path: str
    rotation: str
    keep_total: int
    compression: str


def setup_logging(log_lvl: str = "DEBUG", options: Optional[LoggingOptions] = None) -> None:
    """
    - Console sink with colors.
    - Optional file sink with rotation, retention (count-based) and compression.
    - Bridges stdlib logging to Loguru.
    - Captures unhandled exceptions (main thread + worker threads).
    """
    if options is None:
        options = {}

    show_file     = bool(options.get("show_file", False))
    show_function = bool(options.get("show_function", False))
    show_thread   = bool(options.get("show_thread", False))
    to_file       = bool(options.get("to_file", False))
    file_path     = options.get("file_path", "logs/driftproximity.log")
    rotation      = options.get("rotation", "5 MB")
    keep_total    = int(options.get("keep_total", 5))
    compression   = options.get("compression", "gz")

    log_fmt = (
        "<n><d><level>{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        f"{'{file:>15.15}:' if show_file else ''}"
        f"{'{function:>15.15}' if show_function else ''}"
        f"{':{line:<4} | ' if (show_file or show_function) else ''}"
        f"{'{thread.name:<11.11} | ' if show_thread else ''}"
        "{level:1.1} | </level></d></n><level>{message}</level>"
    )

    # Remove defaults to avoid duplicates if setup called twice
    logger.remove()

    # Console
    logger.add(
        sys.stdout,
        level=log_lvl,
        format=log_fmt,
        colorize=True,
        backtrace=True,
        diagnose=True,
        enqueue=True,
    )

    # File - optional
    if to_file:
        Path(os.path.dirname(file_path) or ".").mkdir(parents=True, exist_ok=True)

        # We want N total files: 1 current + (N-1) rotated
        rotated_keep = max(0, keep_total - 1)

        logger.add(
            file_path,
            level=log_lvl,
            format=log_fmt,
            colorize=False,
            backtrace=True,
            diagnose=True,
            rotation=rotation,
            retention=rotated_keep,
            compression=compression,
            enqueue=True,
        )

    # bridge stdlib logging to Loguru
    class InterceptHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            try:
                level = logger.level(record.levelname).name
            except ValueError:
                level = record.levelno
            logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())

    logging.root.handlers = [InterceptHandler()]
    # loguru levels (TRACE, SUCCESS) have no stdlib name, use the number
    logging.root.setLevel(logger.level(log_lvl).no)

    # capture unhandled exceptions
    def _excepthook(exc_type, exc, tb):
        if issubclass(exc_type, KeyboardInterrupt):
            return
        logger.opt(exception=(exc_type, exc, tb)).error("Unhandled exception")

    sys.excepthook = _excepthook

    # filter passes may be mapped over a thread pool
    def _thread_excepthook(args):
        logger.opt(exception=(args.exc_type, args.exc_value, args.exc_traceback)).error(
            f"Unhandled exception in thread {args.thread.name if args.thread else '?'}"
        )

    threading.excepthook = _thread_excepthook

    logger.debug(
        "Loguru configured (lvl={}, to_file={}, file={}, rotation={}, keep_total={}, compression={})",
        log_lvl, to_file, file_path, rotation, keep_total, compression
    )


__all__ = ["logger", "setup_logging"]
