"""Per-call parsing parameters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Parameters:
    """Immutable configuration consumed by a single parse.

    Attributes:
        separator: Splits sequence values. Empty means sequences cannot be
            parsed and always fall back.
        layout: ``datetime.strptime`` format for timestamps. An empty layout
            is passed through unchanged and fails on any input.
    """

    separator: str = ""
    layout: str = ""


__all__ = ["Parameters"]
