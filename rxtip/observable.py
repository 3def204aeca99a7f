"""
RxTip Observable - Publish/Subscribe Primitive
==============================================

This module provides the single notification primitive the rest of rxtip is
built on. An ``Observable`` holds the most recent value (or the last N values
when created with a larger ``buffer_size``) and pushes every new value to its
subscribers synchronously, on the thread that calls ``set()``.

The same object backs every delivery style the library offers:

- plain callbacks: ``obs.subscribe(print, call_immediately=True)``
- delegate objects: see ``rxtip.delegate``
- RxPY streams: see ``rxtip.streams``

Basic Usage
-----------

```python
from rxtip import Observable

name = Observable("name", "Ada")
unsubscribe = name.subscribe(print, call_immediately=True)  # prints "Ada"
name.set("Grace")                                            # prints "Grace"
unsubscribe()
```

Replay
------

``buffer_size`` controls how much history a late subscriber sees when it asks
for ``call_immediately``. The default of 1 gives "current value" semantics;
``Observable(buffer_size=3)`` behaves like a replay subject of size 3.
"""

import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, Generic, List, Optional, Tuple, TypeVar

from .errors import CircularUpdateError, ObservableCompletedError

T = TypeVar("T")

Unsubscribe = Callable[[], None]


# ============================================================================
# SENTINEL VALUES
# ============================================================================


class _NULL_EVENT:
    """Sentinel for 'no value published yet'."""

    def __repr__(self):
        return "NULL_EVENT"


NULL_EVENT: Any = _NULL_EVENT()


def _noop() -> None:
    pass


# ============================================================================
# OBSERVABLE
# ============================================================================


class Observable(Generic[T]):
    """
    A value holder that notifies subscribers every time a value is set.

    Setting an equal value republishes it; there is no change detection.
    """

    def __init__(
        self,
        key: Optional[str] = None,
        initial_value: Any = NULL_EVENT,
        buffer_size: int = 1,
    ) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self._key = key or "<unnamed>"
        self._lock = threading.RLock()
        self._callbacks: List[Tuple[Callable[[T], Any], Optional[Callable[[], Any]]]] = []
        self._history: Deque[T] = deque(maxlen=buffer_size)
        self._local = threading.local()
        self._is_completed = False
        if initial_value is not NULL_EVENT:
            self._history.append(initial_value)

    @property
    def key(self) -> str:
        return self._key

    @property
    def buffer_size(self) -> int:
        return self._history.maxlen

    @property
    def value(self) -> Any:
        """Latest published value, or ``NULL_EVENT`` if there is none."""
        with self._lock:
            if not self._history:
                return NULL_EVENT
            return self._history[-1]

    @property
    def history(self) -> List[T]:
        """Buffered values, oldest first."""
        with self._lock:
            return list(self._history)

    @property
    def is_completed(self) -> bool:
        return self._is_completed

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def set(self, value: T) -> "Observable[T]":
        if self._is_completed:
            raise ObservableCompletedError(
                f"Cannot set '{self._key}': observable has completed"
            )
        if getattr(self._local, "is_notifying", False):
            raise CircularUpdateError(
                f"Circular update detected: cannot set '{self._key}' while it is notifying observers"
            )

        with self._lock:
            self._history.append(value)
            callbacks = [callback for callback, _ in self._callbacks]

        # notifying state is tracked per thread
        self._local.is_notifying = True
        try:
            for callback in callbacks:
                callback(value)
        finally:
            self._local.is_notifying = False
        return self

    def subscribe(
        self,
        callback: Callable[[T], Any],
        call_immediately: bool = False,
        on_completed: Optional[Callable[[], Any]] = None,
    ) -> Unsubscribe:
        """
        Register ``callback`` for future values.

        Args:
            callback: Called with each published value.
            call_immediately: Replay the buffered history to ``callback`` first.
            on_completed: Called once when the observable completes.

        Returns:
            Unsubscribe function. Calling it more than once is harmless.
        """
        with self._lock:
            replay = list(self._history) if call_immediately else []
            completed = self._is_completed
            entry = (callback, on_completed)
            if not completed:
                self._callbacks.append(entry)

        try:
            for value in replay:
                callback(value)
        except Exception:
            with self._lock:
                if entry in self._callbacks:
                    self._callbacks.remove(entry)
            raise

        if completed:
            if on_completed is not None:
                on_completed()
            return _noop

        def unsubscribe() -> None:
            with self._lock:
                if entry in self._callbacks:
                    self._callbacks.remove(entry)

        return unsubscribe

    def unsubscribe(self, callback: Callable[[T], Any]) -> None:
        with self._lock:
            self._callbacks = [
                entry for entry in self._callbacks if entry[0] != callback
            ]

    def complete(self) -> None:
        """Finish the observable: notify completion hooks and drop subscribers."""
        with self._lock:
            if self._is_completed:
                return
            self._is_completed = True
            hooks = [hook for _, hook in self._callbacks if hook is not None]
            self._callbacks.clear()

        logging.debug(f"Observable '{self._key}' completed")
        for hook in hooks:
            hook()

    def __repr__(self) -> str:
        state = "completed" if self._is_completed else "active"
        return f"Observable({self._key}={self.value!r}, {state})"


# ============================================================================
# SUBSCRIPTION BAG
# ============================================================================


class SubscriptionBag:
    """
    Owns a group of unsubscribe functions and cancels them together.

    Typically held by whatever owns a screen, and disposed when it goes away.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._unsubscribers: List[Unsubscribe] = []
        self._is_disposed = False

    def add(self, unsubscribe: Unsubscribe) -> Unsubscribe:
        """Track ``unsubscribe``; if the bag is already disposed, call it now."""
        with self._lock:
            if not self._is_disposed:
                self._unsubscribers.append(unsubscribe)
                return unsubscribe
        unsubscribe()
        return unsubscribe

    def dispose(self) -> None:
        with self._lock:
            if self._is_disposed:
                return
            self._is_disposed = True
            pending, self._unsubscribers = self._unsubscribers, []

        for unsubscribe in pending:
            unsubscribe()

    @property
    def is_disposed(self) -> bool:
        return self._is_disposed

    def __len__(self) -> int:
        with self._lock:
            return len(self._unsubscribers)

    def __enter__(self) -> "SubscriptionBag":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()
