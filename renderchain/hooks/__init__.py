"""Host lifecycle hooks."""

from .bus import HookBus, HookHost

__all__ = ["HookBus", "HookHost"]
