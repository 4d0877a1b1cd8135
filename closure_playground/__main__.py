"""Run the closure walkthrough.

Usage:
    python -m closure_playground [--format {json,text}] [--snippet NAME ...]
                                 [--list] [--log-level LEVEL] [--log-file PATH]

Examples:
    python -m closure_playground
    python -m closure_playground --format=json --snippet also_increment_by_ten
"""
from __future__ import annotations

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
