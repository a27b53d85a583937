"""renderchain — ordered post-processing of a host's rendered HTML."""

from renderchain.config import RenderChainConfig, load_config
from renderchain.context import (
    RenderContext,
    add_renderer,
    configure_logging,
    get_context,
    remove_renderer,
    reset_context,
    set_context,
)
from renderchain.controller import OutputStream, RenderController, TextSink
from renderchain.errors import (
    CaptureError,
    RenderChainError,
    RendererExecutionError,
    UncallableRendererError,
)
from renderchain.hooks import HookBus, HookHost
from renderchain.registry import Pipeline, RendererEntry, RendererRegistry

__version__ = "0.1.0"

__all__ = [
    "CaptureError",
    "HookBus",
    "HookHost",
    "OutputStream",
    "Pipeline",
    "RenderChainConfig",
    "RenderChainError",
    "RenderContext",
    "RenderController",
    "RendererEntry",
    "RendererExecutionError",
    "RendererRegistry",
    "TextSink",
    "UncallableRendererError",
    "add_renderer",
    "configure_logging",
    "get_context",
    "load_config",
    "remove_renderer",
    "reset_context",
    "set_context",
]
