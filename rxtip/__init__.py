"""
RxTip - Reactive Tip Calculator

A tiny view-model that derives tip amount and percentage display strings from
a stepper value, and publishes them through callbacks, delegates or RxPY
streams.
"""

__version__ = "0.1.0"

from .calculator import Subscribable, TipCalculator, TipDisplay
from .config import TipSettings, configure_logging, create_calculator
from .delegate import TipCalculatorDelegate, attach_delegate
from .errors import (
    CircularUpdateError,
    ConfigurationError,
    ObservableCompletedError,
    RxTipError,
    StepperConfigurationError,
)
from .formatting import (
    format_fixed,
    format_tip_amount,
    format_tip_percentage,
    tip_percentage,
    to_decimal,
)
from .observable import NULL_EVENT, Observable, SubscriptionBag
from .scheduling import ImmediateDispatcher, QueueDispatcher, deliver_on
from .stepper import Stepper, bind_stepper

__all__ = [
    # Core
    "TipCalculator",
    "TipDisplay",
    "Subscribable",
    # Primitive
    "Observable",
    "SubscriptionBag",
    "NULL_EVENT",
    # Transports and delivery
    "TipCalculatorDelegate",
    "attach_delegate",
    "ImmediateDispatcher",
    "QueueDispatcher",
    "deliver_on",
    # Input
    "Stepper",
    "bind_stepper",
    # Formatting
    "format_fixed",
    "format_tip_amount",
    "format_tip_percentage",
    "tip_percentage",
    "to_decimal",
    # Configuration
    "TipSettings",
    "configure_logging",
    "create_calculator",
    # Exceptions
    "RxTipError",
    "CircularUpdateError",
    "ObservableCompletedError",
    "StepperConfigurationError",
    "ConfigurationError",
]
