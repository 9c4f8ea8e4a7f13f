"""
Async data adapter.

Turns a data source into a resolved record collection. A source may be:

- the collection itself (list, tuple, ...),
- an awaitable resolving to one (coroutine, Future, Task),
- a zero-argument callable returning either of the above.

The collection is handed over as-is: no copying, filtering or validation.
"""

from __future__ import annotations
import asyncio
import inspect
from typing import Any, Callable, Sequence


async def resolve_data(source: Any) -> Sequence[Any]:
    """Resolve a data source to its record collection."""
    if callable(source) and not inspect.isawaitable(source):
        source = source()
    if inspect.isawaitable(source):
        return await source
    return source


def prepare_data(source: Any, callback: Callable[[Sequence[Any]], Any]) -> "asyncio.Task[Sequence[Any]]":
    """
    Schedule resolution of `source` and call `callback(data)` once it resolves.

    The callback never runs inside this call, even for an already-available
    list; it runs exactly once, later, on the running loop. When resolution
    raises, the error surfaces through the returned task and the callback is
    not called. Must be called with a running event loop.
    """
    async def _run() -> Sequence[Any]:
        data = await resolve_data(source)
        callback(data)
        return data

    return asyncio.get_running_loop().create_task(_run())
