"""Report formats understood by the playground CLI."""

from __future__ import annotations

FORMAT_TEXT: str = "text"
FORMAT_JSON: str = "json"
DEFAULT_FORMAT: str = FORMAT_TEXT
SUPPORTED_FORMATS: frozenset[str] = frozenset({FORMAT_TEXT, FORMAT_JSON})


def normalize_format(value: str) -> str:
    return value.strip().lower()


def is_supported(value: str) -> bool:
    return normalize_format(value) in SUPPORTED_FORMATS


def coerce_format(value: str) -> str:
    """Normalise ``value`` or raise ``ValueError`` when it is not supported."""
    normalized = normalize_format(value)
    if normalized not in SUPPORTED_FORMATS:
        supported = ", ".join(sorted(SUPPORTED_FORMATS))
        raise ValueError(
            f"unsupported report format '{value}'. Expected one of: {supported}"
        )
    return normalized


__all__ = [
    "DEFAULT_FORMAT",
    "FORMAT_JSON",
    "FORMAT_TEXT",
    "SUPPORTED_FORMATS",
    "coerce_format",
    "is_supported",
    "normalize_format",
]
