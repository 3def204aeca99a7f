"""
RxTip Exceptions
================

Every error raised by the library derives from ``RxTipError`` so callers can
catch the whole family at once, while the mixed-in builtin (``RuntimeError``
or ``ValueError``) keeps ordinary ``except`` clauses working.
"""


class RxTipError(Exception):
    """Base class for all rxtip errors."""

    pass


class CircularUpdateError(RxTipError, RuntimeError):
    """An observable was set from inside one of its own subscribers."""

    pass


class ObservableCompletedError(RxTipError, RuntimeError):
    """A value was pushed into an observable that already completed."""

    pass


class StepperConfigurationError(RxTipError, ValueError):
    """Stepper range or step size is not usable."""

    pass


class ConfigurationError(RxTipError, ValueError):
    """A setting could not be parsed."""

    pass
