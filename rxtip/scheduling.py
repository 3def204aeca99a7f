"""
RxTip Scheduling - Delivery Policies
====================================

The calculator notifies on whatever thread calls ``set_tip_amount``. When the
receiver must run on a particular thread (a UI loop, typically), wrap the
subscriber with ``deliver_on`` and a dispatcher that marshals calls there:

```python
ui_queue = QueueDispatcher()
calc.amount_text.subscribe(deliver_on(ui_queue, label.set_text))

# later, on the UI thread
ui_queue.drain()
```
"""

import threading
from collections import deque
from typing import Any, Callable, Deque, Protocol, Tuple


class Dispatcher(Protocol):
    def dispatch(self, fn: Callable[..., Any], *args: Any) -> None: ...


class ImmediateDispatcher:
    """Runs every call inline on the calling thread."""

    def dispatch(self, fn: Callable[..., Any], *args: Any) -> None:
        fn(*args)


class QueueDispatcher:
    """
    Queues calls until the owning loop drains them.

    ``dispatch`` may be called from any thread; ``drain`` runs the queued
    calls in FIFO order on the thread that calls it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: Deque[Tuple[Callable[..., Any], Tuple[Any, ...]]] = deque()

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def dispatch(self, fn: Callable[..., Any], *args: Any) -> None:
        with self._lock:
            self._pending.append((fn, args))

    def drain(self) -> int:
        """Run queued calls, including ones queued while draining. Returns the count."""
        count = 0
        while True:
            with self._lock:
                if not self._pending:
                    return count
                fn, args = self._pending.popleft()
            fn(*args)
            count += 1


def deliver_on(dispatcher: Dispatcher, callback: Callable[[Any], Any]) -> Callable[[Any], None]:
    """Wrap ``callback`` so each value goes through ``dispatcher``."""

    def delivered(value: Any) -> None:
        dispatcher.dispatch(callback, value)

    return delivered
