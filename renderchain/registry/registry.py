"""RendererRegistry — ordered collection of renderer registrations."""

from __future__ import annotations

import itertools
import logging
import re

from renderchain.errors import UncallableRendererError
from renderchain.registry.callbacks import resolve_callback
from renderchain.registry.models import Pipeline, RendererEntry

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?\d+(\.\d*)?([eE][+-]?\d+)?")


def coerce_priority(value: object) -> int:
    """Loose integer cast: ints pass, floats truncate, strings use their numeric prefix.

    ``"5abc"`` gives 5. Anything without a number maps to 0.
    """
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        m = _NUMERIC_PREFIX.match(value)
        if m:
            try:
                return int(float(m.group()))
            except OverflowError:
                pass
    else:
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            pass
    logger.warning("Non-numeric renderer priority %r, using 0", value)
    return 0


def _as_handle(value: object) -> int | None:
    """Handles are ints; digit-only strings such as ``"3"`` are accepted too."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    return None


class RendererRegistry:
    """Append-only-with-holes store of renderer registrations.

    Handles are issued from a monotonic counter. Removing an entry leaves a
    gap; every other handle stays valid and is never reissued.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self._entries: dict[int, RendererEntry] = {}
        self._counter = itertools.count()
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def register(
        self, pipeline: str, callback: object, priority: object = DEFAULT_PRIORITY
    ) -> int:
        """Add a renderer and return its handle."""
        if self._strict and resolve_callback(callback) is None:
            raise UncallableRendererError(callback)

        if isinstance(pipeline, Pipeline):
            pipeline = pipeline.value

        handle = next(self._counter)
        self._entries[handle] = RendererEntry(
            handle=handle,
            pipeline=pipeline,
            callback=callback,
            priority=coerce_priority(priority),
        )
        logger.debug("Registered renderer %d on %s: %r", handle, pipeline, callback)
        return handle

    def unregister(self, handle: object) -> bool:
        """Remove the entry for *handle*. Returns False if it is not live."""
        handle = _as_handle(handle)
        if handle is None or self._entries.pop(handle, None) is None:
            return False
        logger.debug("Removed renderer %d", handle)
        return True

    def entries_for(self, pipeline: str) -> list[RendererEntry]:
        """Live entries for *pipeline*, in insertion order."""
        return [e for e in self._entries.values() if e.pipeline == pipeline]

    def entries(self) -> list[RendererEntry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, handle: object) -> bool:
        handle = _as_handle(handle)
        return handle is not None and handle in self._entries
