"""Exception types raised by renderchain."""

from __future__ import annotations


class RenderChainError(Exception):
    """Base class for renderchain errors."""


class UncallableRendererError(RenderChainError):
    """Raised at registration when strict checking cannot resolve a callback."""

    def __init__(self, callback: object) -> None:
        self.callback = callback
        super().__init__(f"Renderer callback is not callable: {callback!r}")


class RendererExecutionError(RenderChainError):
    """Wraps an exception raised by a renderer during dispatch."""

    def __init__(
        self, pipeline: str, handle: int, priority: int, cause: Exception
    ) -> None:
        self.pipeline = pipeline
        self.handle = handle
        self.priority = priority
        super().__init__(
            f"Renderer {handle} (pipeline={pipeline}, priority={priority}) failed: {cause}"
        )
        self.__cause__ = cause


class CaptureError(RenderChainError):
    """Raised when output capture is stopped without being started."""
