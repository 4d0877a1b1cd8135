"""Counters that keep their running total in a captured variable.

``make_incrementer`` returns a nested function closing over two names from
the enclosing call: the step and the running total. Every call to the
factory creates a fresh cell for the total, while every reference to the
returned function shares that one cell.
"""

from __future__ import annotations

from typing import Callable

Incrementer = Callable[[], int]


def make_incrementer(amount: int) -> Incrementer:
    """Return a function that adds ``amount`` to a running total on each call."""
    running_total = 0

    def incrementer() -> int:
        nonlocal running_total
        running_total += amount
        return running_total

    return incrementer


def captured_total(incrementer: Incrementer) -> int:
    """Read the running total captured by ``incrementer`` without advancing it.

    Any closure with a free variable named ``running_total`` is accepted;
    the check does not prove the function came from :func:`make_incrementer`.
    """
    code = incrementer.__code__
    closure = incrementer.__closure__ or ()
    cells = dict(zip(code.co_freevars, closure))
    if "running_total" not in cells:
        raise TypeError(f"{incrementer!r} was not created by make_incrementer")
    return cells["running_total"].cell_contents


__all__ = ["Incrementer", "captured_total", "make_incrementer"]
