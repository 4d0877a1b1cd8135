"""The closure walkthrough: an ordered catalogue of snippets.

Each snippet is a zero-argument callable evaluated exactly once, in
catalogue order. Snippets built by the same :func:`build_snippets` call share
their counters, so later counter snippets observe the totals advanced by
earlier ones, and the alias snippet advances the same total as the
original name.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .counter import make_incrementer
from .digits import NUMBERS, map_over, spell_digits
from .errors import UnknownSnippetError
from .formats import DEFAULT_FORMAT, FORMAT_JSON, coerce_format
from .ordering import COMPARATORS, sort_with

logger = logging.getLogger(__name__)

NAMES: tuple[str, ...] = ("Chris", "Alex", "Ewa", "Barry", "Daniella")


@dataclass(frozen=True)
class Snippet:
    name: str
    title: str
    run: Callable[[], Any]


@dataclass(frozen=True)
class SnippetResult:
    """Value produced by evaluating one snippet."""

    name: str
    title: str
    value: Any


def build_snippets() -> List[Snippet]:
    """Create a fresh walkthrough with its own counters."""
    increment_by_ten = make_incrementer(10)
    increment_by_five = make_incrementer(5)
    also_increment_by_ten = increment_by_ten

    names = list(NAMES)

    def by_typed_closure(s1: str, s2: str) -> bool:
        return s1 > s2

    def strings() -> List[str]:
        @map_over(NUMBERS)
        def spelled(number: int) -> str:
            return spell_digits(number)

        return spelled

    return [
        Snippet("increment_by_ten_1", "increment_by_ten()", increment_by_ten),
        Snippet("increment_by_ten_2", "increment_by_ten()", increment_by_ten),
        Snippet("increment_by_ten_3", "increment_by_ten()", increment_by_ten),
        Snippet("increment_by_five_1", "increment_by_five()", increment_by_five),
        Snippet("increment_by_five_2", "increment_by_five()", increment_by_five),
        Snippet("increment_by_ten_4", "increment_by_ten()", increment_by_ten),
        Snippet("also_increment_by_ten", "also_increment_by_ten()", also_increment_by_ten),
        Snippet(
            "sort_inline",
            "sort_with(names, lambda s1, s2: s1 > s2)",
            lambda: sort_with(names, COMPARATORS["inline"]),
        ),
        Snippet(
            "sort_shorthand",
            "sort_with(names, lambda a, b: a > b)",
            lambda: sort_with(names, COMPARATORS["shorthand"]),
        ),
        Snippet(
            "sort_typed",
            "sort_with(names, annotated nested function)",
            lambda: sort_with(names, by_typed_closure),
        ),
        Snippet(
            "sort_named",
            "sort_with(names, backwards)",
            lambda: sort_with(names, COMPARATORS["named"]),
        ),
        Snippet(
            "sort_operator",
            "sort_with(names, operator.gt)",
            lambda: sort_with(names, COMPARATORS["operator"]),
        ),
        Snippet("map_digit_names", "@map_over(numbers) def strings(number): ...", strings),
    ]


def snippet_names() -> List[str]:
    return [snippet.name for snippet in build_snippets()]


def run_playground(selected: Optional[Iterable[str]] = None) -> List[SnippetResult]:
    """Evaluate the walkthrough top to bottom.

    When ``selected`` is given, every snippet is still evaluated in order but
    only the selected ones are returned. Unknown names raise
    :class:`UnknownSnippetError` before anything is evaluated.
    """
    snippets = build_snippets()
    wanted: Optional[set[str]] = None
    if selected is not None:
        wanted = set(selected)
        known = {snippet.name for snippet in snippets}
        missing = sorted(wanted - known)
        if missing:
            raise UnknownSnippetError(missing)

    results: List[SnippetResult] = []
    for snippet in snippets:
        value = snippet.run()
        logger.debug("evaluated %s -> %r", snippet.name, value)
        if wanted is None or snippet.name in wanted:
            results.append(SnippetResult(snippet.name, snippet.title, value))
    return results


def render_results(results: Sequence[SnippetResult], format: str = DEFAULT_FORMAT) -> str:
    """Render ``results`` as text lines or as a JSON array."""
    fmt = coerce_format(format)
    if fmt == FORMAT_JSON:
        return json.dumps([asdict(result) for result in results], indent=2)
    return "\n".join(f"{result.name}: {result.value!r}" for result in results)


__all__ = [
    "NAMES",
    "Snippet",
    "SnippetResult",
    "build_snippets",
    "render_results",
    "run_playground",
    "snippet_names",
]
