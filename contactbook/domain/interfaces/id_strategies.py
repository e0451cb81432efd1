from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Sequence

from ..entities.contact import Contact
from ..exceptions import IdGenerationError
from ..value_objects.ids import ContactId, IdStrategyName

BASE32_DIGITS = "0123456789abcdefghijklmnopqrstuv"
TIMESTAMP_ID_LENGTH = 21
# Enough base-32 digits to exhaust a double's 52-bit mantissa.
MAX_FRACTION_DIGITS = 11


class IdStrategy(ABC):
    """Assigns the id of a contact about to be added.

    >>> class Constant(IdStrategy):
    ...     name = IdStrategyName.SEQUENTIAL
    ...     def next_id(self, existing):
    ...         return 42
    >>> Constant().next_id([])
    42
    """

    name: ClassVar[IdStrategyName]

    @abstractmethod
    def next_id(self, existing: Sequence[Contact]) -> ContactId:
        """Return an id for a new contact given the currently stored ones."""


class MaxPlusOneIdStrategy(IdStrategy):
    """``1`` for an empty store, otherwise the largest id plus one.

    Only safe while a single writer owns the read-max/assign/write window.
    """

    name = IdStrategyName.SEQUENTIAL

    def next_id(self, existing: Sequence[Contact]) -> int:
        if not existing:
            return 1
        ids = [c.id for c in existing]
        bad = [i for i in ids if not isinstance(i, int) or isinstance(i, bool)]
        if bad:
            raise IdGenerationError(
                f"Sequential ids require integer ids, found {bad[0]!r}"
            )
        return max(ids) + 1


def to_base32(value: float, max_fraction_digits: int = MAX_FRACTION_DIGITS) -> str:
    """Render a non-negative number in base 32, fractional part included.

    >>> to_base32(32.5)
    '10.g'
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    whole = int(value)
    frac = value - whole

    digits: list[str] = []
    while whole:
        whole, rem = divmod(whole, 32)
        digits.append(BASE32_DIGITS[rem])
    text = "".join(reversed(digits)) or "0"

    fraction: list[str] = []
    while frac > 0 and len(fraction) < max_fraction_digits:
        frac *= 32
        digit = int(frac)
        fraction.append(BASE32_DIGITS[digit])
        frac -= digit
    if fraction:
        text += "." + "".join(fraction)
    return text


class TimestampRandomIdStrategy(IdStrategy):
    """Opaque 21-character string built from the clock and two random draws.

    No collision check is made against ``existing``.
    """

    name = IdStrategyName.TIMESTAMP_RANDOM

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        rng: Callable[[], float] = random.random,
    ) -> None:
        self._clock = clock
        self._rng = rng

    def next_id(self, existing: Sequence[Contact]) -> str:
        now_ms = self._clock() * 1000
        head = to_base32(now_ms + self._rng() * 1000)
        filler = to_base32(self._rng() * 1000).replace(".", "")
        return head.replace(".", filler, 1)[:TIMESTAMP_ID_LENGTH]


def strategy_for(name: IdStrategyName | str) -> IdStrategy:
    """Return a fresh strategy instance for a configured strategy name."""
    key = IdStrategyName(name)
    if key is IdStrategyName.TIMESTAMP_RANDOM:
        return TimestampRandomIdStrategy()
    return MaxPlusOneIdStrategy()
