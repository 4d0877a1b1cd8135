"""Spell integers digit by digit using a digit-name table."""

from __future__ import annotations

import types
from typing import Callable, Iterable, List, Mapping, TypeVar

from .errors import DigitLookupError

T = TypeVar("T")
R = TypeVar("R")

DIGIT_NAMES: Mapping[int, str] = types.MappingProxyType(
    {
        0: "Zero", 1: "One", 2: "Two", 3: "Three", 4: "Four",
        5: "Five", 6: "Six", 7: "Seven", 8: "Eight", 9: "Nine",
    }
)

NUMBERS: tuple[int, ...] = (16, 58, 510)


def spell_digits(number: int, names: Mapping[int, str] = DIGIT_NAMES) -> str:
    """Return the names of the decimal digits of ``number``, most significant first.

    ``spell_digits(510)`` is ``"FiveOneZero"``. A digit missing from
    ``names`` raises :class:`DigitLookupError`.
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    if number <= 0:
        raise ValueError(f"expected a positive integer, got {number}")

    output = ""
    while number > 0:
        digit = number % 10
        try:
            output = names[digit] + output
        except KeyError:
            raise DigitLookupError(digit) from None
        number //= 10
    return output


def map_digit_names(
    numbers: Iterable[int], names: Mapping[int, str] = DIGIT_NAMES
) -> List[str]:
    """Spell every number in ``numbers``, preserving order."""
    return [spell_digits(number, names) for number in numbers]


def map_over(values: Iterable[T]) -> Callable[[Callable[[T], R]], List[R]]:
    """Decorator form of ``map``: the decorated name is bound to the mapped list.

    The function body comes after the values it is applied to::

        @map_over([16, 58, 510])
        def strings(number):
            return spell_digits(number)

        strings == ["OneSix", "FiveEight", "FiveOneZero"]
    """
    items = list(values)

    def apply(transform: Callable[[T], R]) -> List[R]:
        return [transform(item) for item in items]

    return apply


__all__ = [
    "DIGIT_NAMES",
    "NUMBERS",
    "map_digit_names",
    "map_over",
    "spell_digits",
]
