"""
Stepper - Numeric Input Control Model
=====================================

Models the stepper control that drives the tip amount. A stepper moves its
value by a fixed step inside ``[minimum, maximum]`` and reports the value on
every interaction, including taps at the edge of the range where the value
does not actually move.

```python
stepper = Stepper()
unbind = bind_stepper(stepper, calculator)
stepper.increment()  # calculator.set_tip_amount(Decimal("1"))
```
"""

from decimal import Decimal

from .calculator import TipCalculator
from .errors import StepperConfigurationError
from .formatting import Numeric, to_decimal
from .observable import Observable, Unsubscribe


class Stepper:
    """Bounded numeric value adjusted in fixed steps."""

    def __init__(
        self,
        value: Numeric = 0,
        minimum: Numeric = 0,
        maximum: Numeric = 100,
        step: Numeric = 1,
        wraps: bool = False,
    ) -> None:
        self._minimum = to_decimal(minimum)
        self._maximum = to_decimal(maximum)
        self._step = to_decimal(step)
        if self._minimum > self._maximum:
            raise StepperConfigurationError(
                f"minimum {self._minimum} is greater than maximum {self._maximum}"
            )
        if self._step <= 0:
            raise StepperConfigurationError(f"step must be positive, got {self._step}")
        self._wraps = wraps
        self._value = self._clamp(to_decimal(value))
        self._changes: Observable[Decimal] = Observable("stepper", self._value)

    @property
    def minimum(self) -> Decimal:
        return self._minimum

    @property
    def maximum(self) -> Decimal:
        return self._maximum

    @property
    def step(self) -> Decimal:
        return self._step

    @property
    def changes(self) -> Observable[Decimal]:
        return self._changes

    @property
    def value(self) -> Decimal:
        return self._value

    @value.setter
    def value(self, new_value: Numeric) -> None:
        self._report(self._clamp(to_decimal(new_value)))

    def increment(self) -> Decimal:
        target = self._value + self._step
        if self._wraps and target > self._maximum:
            target = self._minimum
        self._report(self._clamp(target))
        return self._value

    def decrement(self) -> Decimal:
        target = self._value - self._step
        if self._wraps and target < self._minimum:
            target = self._maximum
        self._report(self._clamp(target))
        return self._value

    def _clamp(self, value: Decimal) -> Decimal:
        return min(max(value, self._minimum), self._maximum)

    def _report(self, value: Decimal) -> None:
        self._value = value
        self._changes.set(value)

    def __repr__(self) -> str:
        return (
            f"Stepper(value={self._value}, minimum={self._minimum}, "
            f"maximum={self._maximum}, step={self._step})"
        )


def bind_stepper(
    stepper: Stepper, calculator: TipCalculator, sync_now: bool = False
) -> Unsubscribe:
    """
    Forward every value ``stepper`` reports to ``calculator.set_tip_amount``.

    With ``sync_now`` the stepper's current value is pushed immediately.
    """
    return stepper.changes.subscribe(calculator.set_tip_amount, call_immediately=sync_now)
