"""
RxTip TipCalculator - Reactive Tip View-Model
=============================================

``TipCalculator`` keeps a fixed price before tip and a mutable tip amount.
Each time the tip amount is set, it recomputes two display strings and
publishes them, amount first and percentage second:

```python
from rxtip import TipCalculator

calc = TipCalculator(20)
calc.observe_amount_text().subscribe(print, call_immediately=True)
# Tip Amount: $0.00
calc.set_tip_amount(4)
# Tip Amount: $4.00
calc.percentage_text.value
# '20.00 %'
```

There is no validation on either number. A zero price produces an ``inf %``
or ``nan %`` percentage rather than an exception.
"""

import logging
import threading
from decimal import Decimal
from typing import Any, Callable, NamedTuple, Optional

from .errors import CircularUpdateError, ObservableCompletedError
from .formatting import Numeric, format_tip_amount, format_tip_percentage, to_decimal
from .observable import Observable, Unsubscribe


class TipDisplay(NamedTuple):
    """Snapshot of both derived strings."""

    amount_text: str
    percentage_text: str


class Subscribable:
    """
    Read-only view over an ``Observable``.

    Subscribers see the current value first and every update after it.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Observable):
        self._source = source

    @property
    def value(self) -> Any:
        return self._source.value

    def subscribe(
        self,
        callback: Callable[[Any], Any],
        call_immediately: bool = True,
        on_completed: Optional[Callable[[], Any]] = None,
    ) -> Unsubscribe:
        return self._source.subscribe(
            callback, call_immediately=call_immediately, on_completed=on_completed
        )

    def __repr__(self) -> str:
        return f"Subscribable({self._source.key}={self.value!r})"


class TipCalculator:
    """View-model deriving tip display strings from a tip amount."""

    def __init__(self, price_before_tip: Numeric) -> None:
        self._price_before_tip = to_decimal(price_before_tip)
        self._tip_amount = Decimal(0)
        self._local = threading.local()
        self._amount_text: Observable[str] = Observable(
            "amount_text", format_tip_amount(self._tip_amount)
        )
        self._percentage_text: Observable[str] = Observable(
            "percentage_text",
            format_tip_percentage(self._tip_amount, self._price_before_tip),
        )
        logging.debug(f"TipCalculator created with price {self._price_before_tip}")

    @property
    def price_before_tip(self) -> Decimal:
        return self._price_before_tip

    @property
    def tip_amount(self) -> Decimal:
        return self._tip_amount

    @property
    def amount_text(self) -> Observable[str]:
        return self._amount_text

    @property
    def percentage_text(self) -> Observable[str]:
        return self._percentage_text

    @property
    def display(self) -> TipDisplay:
        return TipDisplay(self._amount_text.value, self._percentage_text.value)

    @property
    def is_closed(self) -> bool:
        return self._amount_text.is_completed

    def set_tip_amount(self, new_value: Numeric) -> None:
        """
        Replace the tip amount and publish both display strings.

        Both strings are computed before any state changes. Subscriber errors
        propagate, but the percentage is still published when an amount
        subscriber raises, so ``display`` always matches ``tip_amount``.
        """
        if self.is_closed:
            raise ObservableCompletedError("Cannot set tip amount: calculator is closed")
        if getattr(self._local, "is_updating", False):
            raise CircularUpdateError(
                "Circular update detected: cannot set tip amount while publishing it"
            )

        tip_amount = to_decimal(new_value)
        amount_text = format_tip_amount(tip_amount)
        percentage_text = format_tip_percentage(tip_amount, self._price_before_tip)

        self._tip_amount = tip_amount
        logging.debug(f"Tip amount set to {tip_amount}")
        self._local.is_updating = True
        try:
            try:
                self._amount_text.set(amount_text)
            finally:
                self._percentage_text.set(percentage_text)
        finally:
            self._local.is_updating = False

    def update_tip_amount(self, new_value: Numeric) -> None:
        """Alias for ``set_tip_amount``."""
        self.set_tip_amount(new_value)

    def observe_amount_text(self) -> Subscribable:
        return Subscribable(self._amount_text)

    def observe_percentage_text(self) -> Subscribable:
        return Subscribable(self._percentage_text)

    def close(self) -> None:
        """Complete both streams; subscribers get ``on_completed`` and are dropped."""
        self._amount_text.complete()
        self._percentage_text.complete()

    def __enter__(self) -> "TipCalculator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"TipCalculator(price_before_tip={self._price_before_tip}, "
            f"tip_amount={self._tip_amount})"
        )
