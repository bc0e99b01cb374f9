"""Console logging utilities for Octadis.

Provides a levelled console logger with colours and timestamps, and a tqdm
progress wrapper for long listings. Logs go to stderr so they never
interleave with a listing written to stdout.
"""

import sys
import time
from functools import partialmethod
from typing import Iterable, Optional, TextIO

from tqdm import tqdm


COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
    "RESET": "\033[0m",
}

LEVEL_ORDER = {
    "DEBUG": 0,
    "INFO": 1,
    "WARNING": 2,
    "ERROR": 3,
    "CRITICAL": 4,
}


def stream_supports_color(stream: TextIO) -> bool:
    return hasattr(stream, "isatty") and stream.isatty()


class ConsoleLogger:
    """Levelled console logger writing ``[elapsed][LEVEL][name] message`` lines.

    Colours are only emitted when requested and the stream is a terminal.
    """

    def __init__(
        self,
        name: str = "Octadis",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream: Optional[TextIO] = None,
    ):
        level = log_level.upper()
        if level not in LEVEL_ORDER:
            raise ValueError(
                f"Unknown log level '{log_level}'. Available: {list(LEVEL_ORDER.keys())}"
            )
        self.name = name
        self.log_level = level
        self.threshold = LEVEL_ORDER[level]
        self.stream = sys.stderr if stream is None else stream
        self.use_colors = use_colors and stream_supports_color(self.stream)
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def enabled_for(self, level: str) -> bool:
        return LEVEL_ORDER.get(level.upper(), LEVEL_ORDER["INFO"]) >= self.threshold

    def _prefix(self, level: str) -> str:
        parts = []
        if self.show_timestamps:
            parts.append(f"[{time.time() - self.start_time:8.2f}s]")

        tag = f"[{level:>8s}]"
        if self.use_colors:
            tag = f"{COLORS.get(level.upper(), '')}{tag}{COLORS['RESET']}"
        parts.append(tag)
        parts.append(f"[{self.name}]")
        return "".join(parts)

    def log(self, level: str, message: str):
        if self.enabled_for(level):
            print(f"{self._prefix(level)} {message}", file=self.stream, flush=True)

    debug = partialmethod(log, "DEBUG")
    info = partialmethod(log, "INFO")
    warning = partialmethod(log, "WARNING")
    error = partialmethod(log, "ERROR")
    critical = partialmethod(log, "CRITICAL")


def progress(
    iterable: Iterable,
    total: Optional[int] = None,
    enabled: bool = True,
    desc: Optional[str] = None,
    **kwargs,
) -> Iterable:
    """Wrap iterable in a tqdm progress bar when enabled."""
    if not enabled:
        return iterable

    if desc is None:
        desc = "Disassembling"

    kwargs.setdefault("file", sys.stderr)
    return tqdm(iterable, total=total, desc=desc, unit="op", **kwargs)
