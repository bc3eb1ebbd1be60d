"""
conversation_parser.py
======================

Extracts the customers a recommendation passage affirmatively mentions.

Matching is a plain substring check on canonical forms (see
``normalization``), followed by a proximity heuristic: a customer whose
name shows up within a short window of a withdrawal cue such as "removed"
or "no longer recommend" is treated as dropped, not recommended.  There
is no word-boundary guard, so a name contained in another name (e.g.
"Core" in "MediCore") matches on its own as well.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from .normalization import (
    NEGATION_WINDOW_PADDING,
    NEGATIVE_CUES,
    find_all_offsets,
    normalize_customer_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityName:
    """A customer display name paired with its canonical form."""

    display: str
    canonical: str


def find_cue_offsets(normalized_text: str) -> Set[int]:
    """Start offsets of every negation cue in an already canonical text."""
    offsets: Set[int] = set()
    for cue in NEGATIVE_CUES:
        offsets.update(find_all_offsets(cue, normalized_text))
    return offsets


def is_negated(
    canonical: str,
    normalized_text: str,
    cue_offsets: Set[int],
    window_padding: int = NEGATION_WINDOW_PADDING,
) -> bool:
    """True if any occurrence of ``canonical`` sits near any cue.

    One withdrawn mention is enough to suppress the customer for the
    whole passage, even if it is also mentioned elsewhere without a cue.
    """
    if not cue_offsets:
        return False
    threshold = len(canonical) + window_padding
    for index in find_all_offsets(canonical, normalized_text):
        if any(abs(cue_index - index) <= threshold for cue_index in cue_offsets):
            return True
    return False


def extract_customers(
    passage: Optional[str],
    customer_names: Optional[Sequence[str]],
    window_padding: int = NEGATION_WINDOW_PADDING,
) -> List[EntityName]:
    """Returns the customers ``passage`` recommends, in ``customer_names`` order.

    Duplicate names (by canonical form) are reported once, at the position
    of their first entry in ``customer_names``.  Blank or non-string names
    are skipped, and an empty passage yields an empty list.
    """
    normalized_text = normalize_customer_name(passage)
    if not normalized_text or customer_names is None:
        return []
    cue_offsets = find_cue_offsets(normalized_text)
    seen: Set[str] = set()
    found: List[EntityName] = []
    for name in customer_names:
        if not isinstance(name, str):
            logger.debug("Skipping non-string customer name %r", name)
            continue
        display = name.strip()
        canonical = normalize_customer_name(display)
        if not canonical or canonical in seen:
            continue
        if canonical not in normalized_text:
            continue
        if is_negated(canonical, normalized_text, cue_offsets, window_padding):
            logger.debug("Customer %s is mentioned next to a negation cue", display)
            continue
        seen.add(canonical)
        found.append(EntityName(display=display, canonical=canonical))
    return found
