"""
Delegate-callback transport.

A delegate is any object with the two ``did_change_*`` methods below. It is
wired to the calculator's observables, so it hears exactly what stream
subscribers hear.
"""

from typing import Protocol

from .calculator import TipCalculator
from .observable import SubscriptionBag, Unsubscribe


class TipCalculatorDelegate(Protocol):
    def did_change_tip_amount_text(self, text: str) -> None: ...

    def did_change_tip_percentage_text(self, text: str) -> None: ...


def attach_delegate(
    calculator: TipCalculator,
    delegate: TipCalculatorDelegate,
    replay_current: bool = False,
) -> Unsubscribe:
    """
    Forward both display strings of ``calculator`` to ``delegate``.

    Args:
        calculator: Source of the display strings.
        delegate: Receiver of amount and percentage updates.
        replay_current: Also push the current strings right away. Off by
            default, so the delegate only hears about later changes.

    Returns:
        Function that detaches the delegate from both streams.
    """
    bag = SubscriptionBag()
    bag.add(
        calculator.amount_text.subscribe(
            delegate.did_change_tip_amount_text, call_immediately=replay_current
        )
    )
    bag.add(
        calculator.percentage_text.subscribe(
            delegate.did_change_tip_percentage_text, call_immediately=replay_current
        )
    )
    return bag.dispose
