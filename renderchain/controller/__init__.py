"""Capture lifecycle and dispatch."""

from .capture import OutputStream, TextSink
from .controller import RenderController

__all__ = ["OutputStream", "RenderController", "TextSink"]
