"""RenderContext — per-request owner of the registry, capture stream and controller."""

from __future__ import annotations

import logging
from collections.abc import Callable

from renderchain.config import RenderChainConfig, load_config
from renderchain.controller.capture import OutputStream, TextSink
from renderchain.controller.controller import RenderController
from renderchain.hooks.bus import HookBus, HookHost
from renderchain.registry.registry import RendererRegistry

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class RenderContext:
    """Everything one document render needs.

    Build one per request; nothing here is shared between contexts.
    Logging is process-wide, so log_level is applied by configure_logging(),
    not here.
    """

    def __init__(
        self,
        config: RenderChainConfig | None = None,
        *,
        hooks: HookHost | None = None,
        sink: TextSink | None = None,
        is_admin: bool | Callable[[], bool] = False,
    ) -> None:
        self.config = config or RenderChainConfig()

        self.hooks = hooks if hooks is not None else HookBus()
        self.registry = RendererRegistry(
            strict=self.config.dispatch.callable_check == "register"
        )
        self.stream = OutputStream(sink)
        self.controller = RenderController(
            self.registry,
            self.stream,
            self.hooks,
            is_admin=is_admin,
            config=self.config,
        )

        for spec in self.config.renderers:
            self.registry.register(spec.pipeline, spec.callback, spec.priority)
        if self.config.renderers:
            logger.debug("Registered %d renderers from config", len(self.config.renderers))

    def add_renderer(
        self, pipeline: str, callback: object, priority: object = None
    ) -> int:
        if priority is None:
            priority = self.config.default_priority
        return self.registry.register(pipeline, callback, priority)

    def remove_renderer(self, handle: object) -> bool:
        return self.registry.unregister(handle)

    def initialize(self) -> None:
        self.controller.initialize()

    def dispatch(self, text: object) -> object:
        return self.controller.dispatch(text)

    def write(self, fragment: str) -> None:
        self.stream.write(fragment)

    def close(self) -> None:
        """End the request, releasing any document still held in a capture."""
        self.controller.finish()


def configure_logging(config: RenderChainConfig) -> None:
    """Apply config log_level to the process-wide renderchain logger."""
    logging.getLogger("renderchain").setLevel(_LOG_LEVELS[config.log_level])


# Default context for the module-level facade
_context: RenderContext | None = None


def get_context() -> RenderContext:
    """Return the default context, creating it from load_config() on first use."""
    global _context
    if _context is None:
        config = load_config()
        configure_logging(config)
        _context = RenderContext(config)
    return _context


def set_context(context: RenderContext) -> None:
    global _context
    _context = context


def reset_context() -> None:
    """Close the default context so the next request starts clean."""
    global _context
    context, _context = _context, None
    if context is not None:
        context.close()


def add_renderer(pipeline: str, callback: object, priority: object = None) -> int:
    """Register *callback* on *pipeline*. Returns a handle for remove_renderer().

    *priority* defaults to the config default_priority (10).
    """
    return get_context().add_renderer(pipeline, callback, priority)


def remove_renderer(handle: object) -> bool:
    """Unregister a renderer. True if it was removed, False if not found."""
    return get_context().remove_renderer(handle)
