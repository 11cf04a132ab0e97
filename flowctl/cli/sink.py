"""Line sinks.

Printers deliver output one line per call to an injected sink, so tests can
observe the emitted lines in order.
"""

import sys
from typing import Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class LineSink(Protocol):
    """Anything that accepts one text line per call."""

    def write_line(self, line: str) -> None: ...


class StreamSink:
    """Writes each line, newline-terminated, to a text stream.

    The stream defaults to ``sys.stdout`` resolved at write time, so output
    follows any redirection installed after the sink was created.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{line}\n")
