"""Renderer registration: models, callback resolution, and the registry."""

from .callbacks import is_callable, resolve_callback
from .models import Pipeline, RendererEntry
from .registry import DEFAULT_PRIORITY, RendererRegistry, coerce_priority

__all__ = [
    "DEFAULT_PRIORITY",
    "Pipeline",
    "RendererEntry",
    "RendererRegistry",
    "coerce_priority",
    "is_callable",
    "resolve_callback",
]
