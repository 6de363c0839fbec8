"""Table formatting and console/file output."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from nscale.scale.types import ScaleEntry
from nscale.util.logging import get_logger, log_exception

CONSOLE_PRECISION = 3
FILE_PRECISION = 6

logger = get_logger(__name__)


def format_entry(entry: ScaleEntry, show_interval: bool, precision: int = CONSOLE_PRECISION) -> str:
    """Format one table line without the trailing newline."""
    freq = f"{entry.frequency_hz:.{precision}f} Hz"
    if show_interval:
        return f"{entry.step_index}:\t{entry.ratio_from_base:.{precision}f}\t{freq}"
    return f"{entry.step_index}:\t{freq}"


def open_output_file(path: Optional[str]) -> Optional[TextIO]:
    """Open ``path`` for writing; a failure is logged and yields None."""
    if not path:
        return None
    try:
        return open(path, "w", encoding="utf-8")
    except OSError as exc:
        logger.warning("unable to create file %s: %s", path, exc.strerror or exc)
        return None


class ScaleWriter:
    """Write entries to the console and, while it stays healthy, to a file.

    The first failed file write stops further file output; console output
    continues and the failure is reported by ``close()``.
    """

    def __init__(
        self,
        show_interval: bool,
        *,
        console: Optional[TextIO] = None,
        outfile: Optional[TextIO] = None,
        path: Optional[str] = None,
    ):
        self.show_interval = show_interval
        self.console = console if console is not None else sys.stdout
        self.outfile = outfile
        self.path = path
        self.write_error: Optional[OSError] = None
        self._closed = False

    @classmethod
    def for_path(cls, show_interval: bool, path: Optional[str], console: Optional[TextIO] = None) -> "ScaleWriter":
        return cls(show_interval, console=console, outfile=open_output_file(path), path=path)

    @property
    def file_ok(self) -> bool:
        return self.outfile is not None and self.write_error is None

    def write(self, entry: ScaleEntry) -> None:
        self.console.write(format_entry(entry, self.show_interval, CONSOLE_PRECISION) + "\n")
        if not self.file_ok:
            return
        try:
            self.outfile.write(format_entry(entry, self.show_interval, FILE_PRECISION) + "\n")
        except OSError as exc:
            self.write_error = exc

    def write_all(self, entries: Iterable[ScaleEntry]) -> None:
        for entry in entries:
            self.write(entry)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self.outfile is not None:
            try:
                self.outfile.close()
            except OSError as exc:
                # buffered data is flushed on close
                if self.write_error is None:
                    self.write_error = exc
            self.outfile = None
        if self.write_error is not None:
            log_exception(logger, f"there was an error writing the file {self.path or ''}".rstrip(), self.write_error)

    def __enter__(self) -> "ScaleWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
