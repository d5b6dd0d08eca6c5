from __future__ import annotations
"""Index-parallel map over blocks."""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def map_indexed(func: Callable[[int, T], R], items: Sequence[T], workers: int = 1) -> list[R]:
    """Return ``[func(i, item) for i, item in enumerate(items)]``.

    With ``workers > 1`` the calls run on a thread pool; results keep input
    order. ``func`` must not write shared state.
    """
    if workers <= 1 or len(items) < 2:
        return [func(i, item) for i, item in enumerate(items)]
    with ThreadPoolExecutor(max_workers=min(workers, len(items))) as pool:
        return list(pool.map(func, range(len(items)), items))
