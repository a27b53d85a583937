"""RenderController — capture lifecycle wiring and ordered renderer dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable

from renderchain.config.models import RenderChainConfig
from renderchain.controller.capture import OutputStream
from renderchain.errors import RendererExecutionError
from renderchain.hooks.bus import HookHost
from renderchain.registry.callbacks import resolve_callback
from renderchain.registry.models import Pipeline
from renderchain.registry.registry import RendererRegistry

logger = logging.getLogger(__name__)


class RenderController:
    """Runs the renderers of the active pipeline over the captured document.

    ``initialize`` picks the pipeline from the host's admin flag and attaches
    ``on_begin_capture`` / ``on_end_capture`` to the pipeline's host hooks.
    The end-capture handler dispatches the captured text and releases the
    result exactly once. ``finish`` does the same at the end of the request
    when the host never signalled the end of capture.
    """

    def __init__(
        self,
        registry: RendererRegistry,
        stream: OutputStream,
        hooks: HookHost,
        *,
        is_admin: bool | Callable[[], bool] = False,
        config: RenderChainConfig | None = None,
    ) -> None:
        self._registry = registry
        self._stream = stream
        self._hooks = hooks
        self._is_admin = is_admin
        self._config = config or RenderChainConfig()
        self._initialized = False
        self._active_pipeline: str | None = None
        self._released = False
        self._capturing = False
        self._capture_depth = 0

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def active_pipeline(self) -> str | None:
        return self._active_pipeline

    @property
    def released(self) -> bool:
        return self._released

    @property
    def capturing(self) -> bool:
        return self._capturing

    def initialize(self) -> None:
        """Select the active pipeline and wire capture hooks. Runs once."""
        if self._initialized:
            return
        self._initialized = True

        flag = self._is_admin() if callable(self._is_admin) else self._is_admin
        self._active_pipeline = Pipeline.admin.value if flag else Pipeline.front.value

        hooks = self._config.hooks.for_pipeline(self._active_pipeline)
        self._hooks.add_action(hooks.begin, self.on_begin_capture, hooks.begin_priority)
        self._hooks.add_action(hooks.end, self.on_end_capture, hooks.end_priority)
        logger.info(
            "Render pipeline %s: capturing between %s and %s",
            self._active_pipeline,
            hooks.begin,
            hooks.end,
        )

    def dispatch(self, text: object) -> object:
        """Thread *text* through the active pipeline's renderers in order."""
        if not self._initialized:
            self.initialize()

        entries = self._registry.entries_for(self._active_pipeline)
        if not entries:
            return text

        # Handles are issued in insertion order, so this is priority-then-registration.
        ordered = sorted(entries, key=lambda e: (e.priority, e.handle))
        isolate = self._config.dispatch.on_error == "isolate"

        for entry in ordered:
            renderer = resolve_callback(entry.callback)
            if renderer is None:
                logger.debug("Skipping uncallable renderer %d: %r", entry.handle, entry.callback)
                continue
            try:
                text = renderer(text)
            except Exception as exc:
                if not isolate:
                    raise RendererExecutionError(
                        entry.pipeline, entry.handle, entry.priority, exc
                    ) from exc
                logger.exception(
                    "Renderer %d (priority %d) failed, keeping previous text",
                    entry.handle,
                    entry.priority,
                )
        return text

    def on_begin_capture(self, *args: object) -> None:
        if self._capturing or self._released:
            logger.warning("Start of capture signalled again, ignoring")
            return
        self._stream.begin_capture()
        self._capturing = True
        self._capture_depth = self._stream.depth

    def on_end_capture(self, *args: object) -> None:
        if self._released:
            logger.warning("End of capture signalled again, document already released")
            return
        if not self._capturing:
            logger.warning("End of capture signalled without an open capture")
            return
        self._release_capture()

    def finish(self) -> None:
        """End of request: release a still-open capture, then flush the stream.

        Safe to call more than once.
        """
        if self._capturing and not self._released:
            logger.warning("Request ended before end of capture, releasing document now")
            self._release_capture()
        self._stream.close()

    def _release_capture(self) -> None:
        # Buffers the host opened inside ours are flushed into ours first.
        while self._stream.depth > self._capture_depth:
            self._stream.release(self._stream.end_capture())
        self._capturing = False
        if self._stream.depth < self._capture_depth:
            logger.warning("Capture buffer was closed by the host, nothing to release")
            return

        raw = self._stream.end_capture()
        final = self.dispatch(raw)
        self._released = True
        self._stream.release(final)
        logger.info("Released %s document", self._active_pipeline)
