"""
RxTip Streams - RxPY Interop
============================

Exposes rxtip observables as RxPY streams, so view code written against RxPY
operators (``map``, ``observe_on``, ``distinct_until_changed`` ...) can bind to
a ``TipCalculator`` directly.

```python
from rx.scheduler import CurrentThreadScheduler
from rxtip import TipCalculator
from rxtip.streams import observe_amount_text

calc = TipCalculator(20)
observe_amount_text(calc, scheduler=CurrentThreadScheduler()).subscribe(
    on_next=label.set_text
)
```

Each rx subscription starts with the current value, then receives every
update; it completes when the calculator is closed. Disposing the rx
subscription unsubscribes from the underlying observable.
"""

from typing import Any, Optional

import rx
from rx import operators as ops
from rx.disposable import Disposable
from rx.subject import ReplaySubject

from .calculator import TipCalculator

DEFAULT_REPLAY_BUFFER_SIZE = 3


def to_rx(source: Any, scheduler: Optional[Any] = None) -> rx.Observable:
    """
    Wrap an ``Observable`` (or ``Subscribable``) as an ``rx.Observable``.

    Args:
        source: Anything with ``subscribe(callback, call_immediately, on_completed)``.
        scheduler: Optional RxPY scheduler; emissions are moved onto it with
            ``observe_on``.
    """

    def subscribe(observer, _scheduler=None):
        unsubscribe = source.subscribe(
            observer.on_next,
            call_immediately=True,
            on_completed=observer.on_completed,
        )
        return Disposable(unsubscribe)

    stream = rx.create(subscribe)
    if scheduler is not None:
        stream = stream.pipe(ops.observe_on(scheduler))
    return stream


def observe_amount_text(
    calculator: TipCalculator, scheduler: Optional[Any] = None
) -> rx.Observable:
    return to_rx(calculator.amount_text, scheduler)


def observe_percentage_text(
    calculator: TipCalculator, scheduler: Optional[Any] = None
) -> rx.Observable:
    return to_rx(calculator.percentage_text, scheduler)


def replay_subject(buffer_size: int = DEFAULT_REPLAY_BUFFER_SIZE) -> ReplaySubject:
    """RxPY subject that replays its last ``buffer_size`` values to late subscribers."""
    return ReplaySubject(buffer_size=buffer_size)
