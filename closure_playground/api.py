"""Public API of the closure playground.

Collects the counter factory, the predicate-driven sort, the digit-name
transform and the walkthrough runner in one namespace.
"""
from __future__ import annotations

from .config import PlaygroundConfig, apply_overrides, load_config_from_env
from .counter import captured_total, make_incrementer
from .digits import DIGIT_NAMES, NUMBERS, map_digit_names, map_over, spell_digits
from .errors import DigitLookupError, PlaygroundError, UnknownSnippetError
from .formats import DEFAULT_FORMAT, FORMAT_JSON, FORMAT_TEXT
from .logs import configure_logging
from .ordering import backwards, sort_descending, sort_with
from .playground import (
    NAMES,
    Snippet,
    SnippetResult,
    build_snippets,
    render_results,
    run_playground,
    snippet_names,
)

__all__ = [
    "DEFAULT_FORMAT",
    "DIGIT_NAMES",
    "DigitLookupError",
    "FORMAT_JSON",
    "FORMAT_TEXT",
    "NAMES",
    "NUMBERS",
    "PlaygroundConfig",
    "PlaygroundError",
    "Snippet",
    "SnippetResult",
    "UnknownSnippetError",
    "apply_overrides",
    "backwards",
    "build_snippets",
    "captured_total",
    "configure_logging",
    "load_config_from_env",
    "make_incrementer",
    "map_digit_names",
    "map_over",
    "render_results",
    "run_playground",
    "snippet_names",
    "sort_descending",
    "sort_with",
    "spell_digits",
]
