"""
Initialize-once holder for expensive objects.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class InitOnce(Generic[T]):
    """Builds a value on first use, exactly once across threads.

    If the factory raises, nothing is stored and the next ``get`` tries again.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._value: Optional[T] = None
        self._initialized = False
        self._lock = threading.Lock()

    @classmethod
    def ready(cls, value: T) -> "InitOnce[T]":
        """Holder around an already built value; ``get`` never takes the lock."""
        holder = cls(lambda: value)
        holder._value = value
        holder._initialized = True
        return holder

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def get(self) -> T:
        if self._initialized:
            return self._value
        with self._lock:
            if not self._initialized:
                self._value = self._factory()
                self._initialized = True
        return self._value
