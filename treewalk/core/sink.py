"""Output sinks for treewalk visitors.

Visitors never print directly. They emit text through a TextSink, which lets
the same visitor write to a terminal, a log file, or an in-memory buffer.
"""

import io
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class TextSink(ABC):
    """Abstract destination for text emitted by visitors."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Append text without a line terminator.

        Args:
            text: Text to append
        """
        pass

    def write_line(self, text: str = "") -> None:
        """Append text followed by a line terminator.

        Args:
            text: Text to append before the newline
        """
        self.write(text)
        self.write("\n")


class StreamSink(TextSink):
    """Sink that writes to a text stream.

    When no stream is given, sys.stdout is looked up on every write so that
    output redirection (and pytest's capture) is honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)


class StringSink(TextSink):
    """Sink that collects everything written into a string buffer.

    Example:
        >>> sink = StringSink()
        >>> sink.write_line("root")
        >>> sink.getvalue()
        'root\\n'
    """

    def __init__(self):
        self._buffer = io.StringIO()

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return self._buffer.getvalue()

    def clear(self) -> None:
        """Discard buffered text."""
        self._buffer = io.StringIO()

    def __str__(self) -> str:
        return self.getvalue()
