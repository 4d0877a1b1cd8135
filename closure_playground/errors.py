"""Exception types raised by the closure playground."""

from __future__ import annotations


class PlaygroundError(RuntimeError):
    """Base class for errors raised by the playground."""


class DigitLookupError(PlaygroundError, KeyError):
    """Raised when a digit has no entry in the digit-name table."""

    def __init__(self, digit: int) -> None:
        super().__init__(f"no name registered for digit {digit}")
        self.digit = digit

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class UnknownSnippetError(PlaygroundError):
    """Raised when a snippet name is not part of the walkthrough."""

    def __init__(self, names: list[str]) -> None:
        joined = ", ".join(names)
        super().__init__(f"unknown snippet(s): {joined}")
        self.names = names


__all__ = [
    "DigitLookupError",
    "PlaygroundError",
    "UnknownSnippetError",
]
