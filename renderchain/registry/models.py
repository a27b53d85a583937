"""Registry data model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Pipeline(str, Enum):
    """Rendering contexts a renderer can be attached to."""

    admin = "admin"
    front = "front"


@dataclass(frozen=True)
class RendererEntry:
    """One registered renderer.

    ``handle`` is issued by the registry in increasing order and is never
    reused, so it also serves as the insertion sequence number.
    """

    handle: int
    pipeline: str
    callback: object
    priority: int = 10

    @property
    def sequence(self) -> int:
        return self.handle
