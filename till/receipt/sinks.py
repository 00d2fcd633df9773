"""Receipt output destinations."""
import sys
from typing import List, Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class ReceiptSink(Protocol):
    """Receives rendered receipt lines, one call per line."""

    def write_line(self, line: str) -> None:
        ...


class StreamSink:
    """Writes lines to a text stream (stdout unless told otherwise)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per write so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        self.stream.write(f"{line}\n")


class ListSink:
    """Collects lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)
