"""
Specialisation of wrapper classes over their contained types.

``Masked[Email]`` or ``Id[User]`` is a real subclass created once and cached,
so specialised wrappers compare, hash and dispatch like ordinary classes.
"""

from __future__ import annotations

import threading
from typing import Any

from .types import type_name

_cache: dict[tuple[type, tuple[Any, ...]], type] = {}
_lock = threading.Lock()


def _argument_name(argument: Any) -> str:
    if isinstance(argument, type):
        return type_name(argument)
    return str(argument)


def specialize(base: type, arguments: tuple[Any, ...], namespace: dict[str, Any]) -> type:
    """Return the cached subclass of *base* specialised over *arguments*.

    *namespace* is only used the first time a given specialisation is built.
    """
    key = (base, arguments)
    with _lock:
        cached = _cache.get(key)
        if cached is not None:
            return cached

        name = f"{base.__name__}[{', '.join(_argument_name(a) for a in arguments)}]"
        body = {
            "__module__": base.__module__,
            "__qualname__": name,
            "__slots__": (),
            **namespace,
        }
        specialised = type(base)(name, (base,), body)
        _cache[key] = specialised
        return specialised
