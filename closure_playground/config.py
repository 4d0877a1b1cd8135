"""Playground configuration loaded from the environment and explicit overrides.

Environment variables are read first; values passed to
:func:`apply_overrides` (typically CLI flags) win over them.

``CLOSURE_PLAYGROUND_FORMAT``
    Report format, ``text`` or ``json``.
``CLOSURE_PLAYGROUND_LOG_LEVEL``
    Logging level name such as ``debug`` or ``warning``.
``CLOSURE_PLAYGROUND_LOG_FILE``
    Write log records to this file instead of stderr.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .formats import DEFAULT_FORMAT, coerce_format

ENV_FORMAT = "CLOSURE_PLAYGROUND_FORMAT"
ENV_LOG_LEVEL = "CLOSURE_PLAYGROUND_LOG_LEVEL"
ENV_LOG_FILE = "CLOSURE_PLAYGROUND_LOG_FILE"

DEFAULT_LOG_LEVEL = "warning"


@dataclass(frozen=True)
class PlaygroundConfig:
    format: str = DEFAULT_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None
    snippets: tuple[str, ...] = field(default_factory=tuple)


def load_config_from_env(environ: Mapping[str, str] | None = None) -> PlaygroundConfig:
    """Build a :class:`PlaygroundConfig` from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ

    fmt = environ.get(ENV_FORMAT) or DEFAULT_FORMAT
    log_level = environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    log_file = environ.get(ENV_LOG_FILE)
    return PlaygroundConfig(
        format=coerce_format(fmt),
        log_level=log_level.strip().lower(),
        log_file=Path(log_file).expanduser() if log_file else None,
    )


def apply_overrides(
    config: PlaygroundConfig, overrides: Mapping[str, object]
) -> PlaygroundConfig:
    """Return a copy of ``config`` with ``overrides`` applied.

    ``None`` values are ignored so callers can pass unset CLI options through.
    """
    known = {f.name for f in dataclasses.fields(PlaygroundConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"unknown configuration key(s): {', '.join(unknown)}")

    changes: dict[str, object] = {}
    for key, value in overrides.items():
        if value is None:
            continue
        if key == "format":
            changes[key] = coerce_format(str(value))
        elif key == "log_level":
            changes[key] = str(value).strip().lower()
        elif key == "log_file":
            changes[key] = Path(os.fspath(value)).expanduser()  # type: ignore[arg-type]
        elif key == "snippets":
            changes[key] = tuple(value)  # type: ignore[arg-type]
        else:
            changes[key] = value
    return dataclasses.replace(config, **changes)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "ENV_FORMAT",
    "ENV_LOG_FILE",
    "ENV_LOG_LEVEL",
    "PlaygroundConfig",
    "apply_overrides",
    "load_config_from_env",
]
