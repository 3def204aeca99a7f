"""
Settings for the tip screen.

``TipSettings`` holds the few knobs the application has. Values come from
defaults or from ``RXTIP_*`` environment variables:

- ``RXTIP_STARTING_PRICE``: price before tip (default ``20.00``)
- ``RXTIP_REPLAY_BUFFER_SIZE``: history kept by replay streams (default ``3``)
- ``RXTIP_LOG_LEVEL``: logging level name (default ``WARNING``)
"""

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from .calculator import TipCalculator
from .errors import ConfigurationError

ENV_PREFIX = "RXTIP_"

DEFAULT_STARTING_PRICE = Decimal("20.00")
DEFAULT_REPLAY_BUFFER_SIZE = 3
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class TipSettings:
    starting_price: Decimal = DEFAULT_STARTING_PRICE
    replay_buffer_size: int = DEFAULT_REPLAY_BUFFER_SIZE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TipSettings":
        """Build settings from ``environ`` (``os.environ`` by default)."""
        if environ is None:
            environ = os.environ

        starting_price = DEFAULT_STARTING_PRICE
        raw = environ.get(ENV_PREFIX + "STARTING_PRICE")
        if raw is not None:
            try:
                starting_price = Decimal(raw.strip())
            except InvalidOperation:
                raise ConfigurationError(
                    f"{ENV_PREFIX}STARTING_PRICE is not a number: {raw!r}"
                ) from None

        replay_buffer_size = DEFAULT_REPLAY_BUFFER_SIZE
        raw = environ.get(ENV_PREFIX + "REPLAY_BUFFER_SIZE")
        if raw is not None:
            try:
                replay_buffer_size = int(raw)
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_PREFIX}REPLAY_BUFFER_SIZE is not an integer: {raw!r}"
                ) from None
            if replay_buffer_size < 1:
                raise ConfigurationError(
                    f"{ENV_PREFIX}REPLAY_BUFFER_SIZE must be at least 1, got {replay_buffer_size}"
                )

        log_level = environ.get(ENV_PREFIX + "LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"{ENV_PREFIX}LOG_LEVEL is not a level: {log_level!r}")

        return cls(
            starting_price=starting_price,
            replay_buffer_size=replay_buffer_size,
            log_level=log_level,
        )


def configure_logging(settings: Optional[TipSettings] = None) -> None:
    settings = settings or TipSettings()
    logging.basicConfig(level=settings.log_level)


def create_calculator(settings: Optional[TipSettings] = None) -> TipCalculator:
    settings = settings or TipSettings()
    return TipCalculator(settings.starting_price)
