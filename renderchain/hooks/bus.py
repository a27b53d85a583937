"""In-process host hook bus used to deliver capture lifecycle signals."""

from __future__ import annotations

import itertools
import logging
from collections import Counter, defaultdict
from collections.abc import Callable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class HookHost(Protocol):
    """What the controller needs from a host: a way to attach to named hooks."""

    def add_action(self, hook: str, callback: Callable, priority: int = 10) -> None: ...


class HookBus:
    """Named hooks with priority-ordered callbacks.

    Callbacks on the same hook run by ascending priority, then in the order
    they were added. ``do_action`` iterates a snapshot, so callbacks may add
    or remove actions while a hook is firing.
    """

    def __init__(self) -> None:
        self._actions: dict[str, list[tuple[int, int, Callable]]] = defaultdict(list)
        self._seq = itertools.count()
        self._fired: Counter[str] = Counter()

    def add_action(self, hook: str, callback: Callable, priority: int = 10) -> None:
        self._actions[hook].append((priority, next(self._seq), callback))
        self._actions[hook].sort(key=lambda item: (item[0], item[1]))

    def remove_action(self, hook: str, callback: Callable) -> bool:
        """Remove the first registration of *callback* on *hook*."""
        actions = self._actions.get(hook, [])
        for i, (_, _, cb) in enumerate(actions):
            if cb == callback:
                del actions[i]
                return True
        return False

    def has_action(self, hook: str, callback: Callable | None = None) -> bool:
        actions = self._actions.get(hook, [])
        if callback is None:
            return bool(actions)
        return any(cb == callback for _, _, cb in actions)

    def do_action(self, hook: str, *args: object) -> None:
        """Fire *hook*, calling each attached callback with *args*."""
        self._fired[hook] += 1
        snapshot = list(self._actions.get(hook, []))
        logger.debug("Firing %s (%d callbacks)", hook, len(snapshot))
        for _, _, callback in snapshot:
            callback(*args)

    def did_action(self, hook: str) -> int:
        """Number of times *hook* has fired."""
        return self._fired[hook]
