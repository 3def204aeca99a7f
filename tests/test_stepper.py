"""Tests for the stepper input model and its binding to the calculator."""

from decimal import Decimal

import pytest

from rxtip import Stepper, StepperConfigurationError, TipDisplay, bind_stepper


def test_stepper_defaults():
    stepper = Stepper()

    assert stepper.value == Decimal(0)
    assert stepper.minimum == Decimal(0)
    assert stepper.maximum == Decimal(100)
    assert stepper.step == Decimal(1)


def test_increment_and_decrement_move_by_step():
    stepper = Stepper(step="0.5")

    stepper.increment()
    stepper.increment()
    stepper.decrement()

    assert stepper.value == Decimal("0.5")


def test_value_is_clamped_to_range():
    stepper = Stepper(maximum=10)

    stepper.value = 25
    assert stepper.value == Decimal(10)

    stepper.value = -3
    assert stepper.value == Decimal(0)


def test_initial_value_is_clamped():
    assert Stepper(value=500).value == Decimal(100)


def test_wrapping_stepper_wraps_at_the_ends():
    stepper = Stepper(value=2, maximum=2, wraps=True)

    stepper.increment()
    assert stepper.value == Decimal(0)

    stepper.decrement()
    assert stepper.value == Decimal(2)


def test_stepper_reports_every_tap_even_at_the_limit(recorder):
    """Taps at the edge of the range still report the value"""
    stepper = Stepper(maximum=1)
    stepper.changes.subscribe(recorder)

    stepper.increment()
    stepper.increment()

    assert recorder.values == [Decimal(1), Decimal(1)]


@pytest.mark.parametrize(
    "kwargs",
    [{"minimum": 5, "maximum": 1}, {"step": 0}, {"step": -1}],
)
def test_invalid_configuration_raises(kwargs):
    with pytest.raises(StepperConfigurationError):
        Stepper(**kwargs)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        Stepper(step=0)


@pytest.mark.integration
def test_bound_stepper_drives_calculator(calculator):
    stepper = Stepper()
    bind_stepper(stepper, calculator)

    for _ in range(4):
        stepper.increment()

    assert calculator.tip_amount == Decimal(4)
    assert calculator.display == TipDisplay("Tip Amount: $4.00", "20.00 %")


@pytest.mark.integration
def test_bind_stepper_sync_now_pushes_current_value(calculator):
    stepper = Stepper(value=3)

    bind_stepper(stepper, calculator, sync_now=True)

    assert calculator.amount_text.value == "Tip Amount: $3.00"


@pytest.mark.integration
def test_bind_stepper_without_sync_leaves_calculator_alone(calculator):
    stepper = Stepper(value=3)

    bind_stepper(stepper, calculator)

    assert calculator.tip_amount == Decimal(0)


@pytest.mark.integration
def test_unbound_stepper_no_longer_drives_calculator(calculator):
    stepper = Stepper()
    unbind = bind_stepper(stepper, calculator)

    stepper.increment()
    unbind()
    stepper.increment()

    assert calculator.tip_amount == Decimal(1)
