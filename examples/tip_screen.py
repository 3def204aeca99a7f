from rich.console import Console
from rich.panel import Panel
from rx.scheduler import CurrentThreadScheduler

from rxtip import (
    QueueDispatcher,
    Stepper,
    SubscriptionBag,
    TipSettings,
    attach_delegate,
    bind_stepper,
    configure_logging,
    create_calculator,
    deliver_on,
)
from rxtip.streams import observe_amount_text, observe_percentage_text

console = Console()
settings = TipSettings.from_env()
configure_logging(settings)


class Label:
    """Stand-in for a text label on screen."""

    def __init__(self, name: str):
        self.name = name
        self.text = ""

    def set_text(self, text: str) -> None:
        self.text = text
        console.print(f"  [dim]{self.name}[/dim] -> [bold]{text}[/bold]")


# ------------------------------------------------------------------------------------------------

console.print(Panel("Delegate screen"))


class DelegateScreen:
    def __init__(self):
        self.amount_label = Label("amount")
        self.percentage_label = Label("percentage")

    def did_change_tip_amount_text(self, text: str) -> None:
        self.amount_label.set_text(text)

    def did_change_tip_percentage_text(self, text: str) -> None:
        self.percentage_label.set_text(text)


calculator = create_calculator(settings)
stepper = Stepper()
screen = DelegateScreen()

with SubscriptionBag() as bag:
    bag.add(attach_delegate(calculator, screen))
    bag.add(bind_stepper(stepper, calculator))

    # Each tap reports the new value, which flows through to both labels.
    stepper.increment()
    stepper.increment()
    stepper.value = 5

calculator.close()

# ------------------------------------------------------------------------------------------------

console.print(Panel("Rx screen"))

calculator = create_calculator(settings)
stepper = Stepper()
amount_label = Label("amount")
percentage_label = Label("percentage")
scheduler = CurrentThreadScheduler()

with SubscriptionBag() as bag:
    # Rx subscriptions start with the current text, so both labels fill in right away.
    bag.add(
        observe_amount_text(calculator, scheduler)
        .subscribe(on_next=amount_label.set_text)
        .dispose
    )
    bag.add(
        observe_percentage_text(calculator, scheduler)
        .subscribe(on_next=percentage_label.set_text)
        .dispose
    )
    bag.add(bind_stepper(stepper, calculator))

    stepper.increment()
    stepper.value = 3.333

calculator.close()

# ------------------------------------------------------------------------------------------------

console.print(Panel("Queued UI delivery"))

calculator = create_calculator(settings)
ui_queue = QueueDispatcher()
amount_label = Label("amount")

calculator.amount_text.subscribe(deliver_on(ui_queue, amount_label.set_text))
calculator.set_tip_amount(2)
calculator.set_tip_amount(4)
console.print(f"  queued updates: {ui_queue.pending}")

# The UI loop picks them up when it gets to them.
ui_queue.drain()
calculator.close()
