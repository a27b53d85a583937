"""Late-bound resolution of renderer callback references."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def resolve_callback(ref: object) -> Callable | None:
    """Return the callable *ref* points at, or None if it cannot be resolved.

    Accepted shapes:
      - any callable (function, bound method, callable object)
      - ``"package.module:Qual.name"`` import strings
      - ``"package.module.name"`` dotted strings
      - ``(target, "method_name")`` pairs
    """
    if isinstance(ref, str):
        target = _import_string(ref)
    elif isinstance(ref, tuple) and len(ref) == 2 and isinstance(ref[1], str):
        target = getattr(ref[0], ref[1], None)
    else:
        target = ref

    if target is None or not callable(target):
        return None
    return target


def is_callable(ref: object) -> bool:
    return resolve_callback(ref) is not None


def _import_string(ref: str) -> object | None:
    if ":" in ref:
        module_path, _, qualname = ref.partition(":")
    else:
        module_path, _, qualname = ref.rpartition(".")
    if not module_path or not qualname:
        return None

    try:
        obj = importlib.import_module(module_path)
    except (ImportError, TypeError, ValueError):
        logger.debug("Cannot import module %s for renderer %r", module_path, ref)
        return None

    for attr in qualname.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            logger.debug("Cannot resolve %s in renderer %r", attr, ref)
            return None
    return obj
