"""OutputStream — explicit capture sink between the host and its real output."""

from __future__ import annotations

import logging
import sys
from typing import Protocol, runtime_checkable

from renderchain.errors import CaptureError

logger = logging.getLogger(__name__)


@runtime_checkable
class TextSink(Protocol):
    """Final destination for document text (a response body, a file, stdout)."""

    def write(self, text: str) -> object: ...


class OutputStream:
    """Routes host output either to the real sink or to a capture buffer.

    The host writes fragments with ``write``. While a capture is open the
    fragments are collected in memory; ``end_capture`` hands back the joined
    text and ``release`` sends a replacement onward. Captures nest.
    """

    def __init__(self, sink: TextSink | None = None) -> None:
        self._sink = sink
        self._buffers: list[list[str]] = []

    @property
    def sink(self) -> TextSink:
        return self._sink if self._sink is not None else sys.stdout

    @property
    def capturing(self) -> bool:
        return bool(self._buffers)

    @property
    def depth(self) -> int:
        return len(self._buffers)

    def write(self, fragment: str) -> None:
        if self._buffers:
            self._buffers[-1].append(fragment)
        else:
            self.sink.write(fragment)

    def begin_capture(self) -> None:
        self._buffers.append([])

    def end_capture(self) -> str:
        """Close the innermost capture and return everything written into it."""
        if not self._buffers:
            raise CaptureError("end_capture() called with no open capture")
        return "".join(self._buffers.pop())

    def release(self, text: object) -> None:
        """Send *text* to the current destination as-is."""
        if not isinstance(text, str):
            logger.warning("Releasing non-text document of type %s", type(text).__name__)
        if self._buffers:
            self._buffers[-1].append(text)
        else:
            self.sink.write(text)

    def close(self) -> None:
        """Flush every open capture outward, innermost first, down to the sink."""
        while self._buffers:
            self.release(self.end_capture())
