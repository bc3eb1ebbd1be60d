"""
delta.py
========

Set difference between the customers of an initial and a revised
recommendation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from .conversation_parser import EntityName, extract_customers


@dataclass(frozen=True)
class DeltaResult:
    """Customers added in, and removed from, the revised recommendation."""

    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed

    def to_dict(self) -> Dict[str, List[str]]:
        return {"added": list(self.added), "removed": list(self.removed)}


def _by_canonical(result: Iterable[EntityName]) -> Dict[str, str]:
    return {entity.canonical: entity.display for entity in result}


def compute_delta(initial: Sequence[EntityName], revised: Sequence[EntityName]) -> DeltaResult:
    """Compares two extraction results by canonical form.

    ``added`` keeps the revised result's order, ``removed`` the initial
    result's order.
    """
    initial_map = _by_canonical(initial)
    revised_map = _by_canonical(revised)
    added = [display for canonical, display in revised_map.items() if canonical not in initial_map]
    removed = [display for canonical, display in initial_map.items() if canonical not in revised_map]
    return DeltaResult(added=added, removed=removed)


def run_scenario(initial_passage: str, revised_passage: str, customer_names: Sequence[str]) -> DeltaResult:
    """Extracts customers from both passages and returns their delta."""
    initial_customers = extract_customers(initial_passage, customer_names)
    revised_customers = extract_customers(revised_passage, customer_names)
    return compute_delta(initial_customers, revised_customers)


def format_delta(delta: DeltaResult) -> List[str]:
    return [
        f"Added: {', '.join(delta.added) if delta.added else 'None'}",
        f"Removed: {', '.join(delta.removed) if delta.removed else 'None'}",
    ]
