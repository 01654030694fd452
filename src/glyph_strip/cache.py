"""Injectable caches for repeated builds of identical inputs."""

from __future__ import annotations

import hashlib
import threading
from typing import Any, Callable, Dict, Generic, Optional, Protocol, TypeVar

T = TypeVar("T")


class BuildCache(Protocol[T]):
    def get(self, key: str) -> Optional[T]:
        ...

    def put(self, key: str, result: T) -> None:
        ...

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        ...


class MemoryCache(Generic[T]):
    """In-process cache computing each key at most once, even across threads."""

    def __init__(self) -> None:
        self._results: Dict[str, T] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def get(self, key: str) -> Optional[T]:
        return self._results.get(key)

    def put(self, key: str, result: T) -> None:
        self._results[key] = result

    def __contains__(self, key: str) -> bool:
        return key in self._results

    def __len__(self) -> int:
        return len(self._results)

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        cached = self._results.get(key)
        if cached is not None:
            return cached
        with self._lock_for(key):
            cached = self._results.get(key)
            if cached is None:
                cached = compute()
                self._results[key] = cached
            return cached


def fingerprint(data: bytes, *parts: Any) -> str:
    """Stable digest of the source bytes and the options that shape the output."""
    digest = hashlib.sha256(data)
    for part in parts:
        digest.update(b"\0")
        digest.update(repr(part).encode("utf-8"))
    return digest.hexdigest()
