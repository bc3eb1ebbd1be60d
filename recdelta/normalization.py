"""
normalization.py
================

Canonical forms for customer names and free text.  Matching in this
package never looks at display strings: both the passage and every
candidate name are reduced to lower-case ASCII letters and digits first,
so "MediCore Clinics", "medicore-clinics" and "Médicore Clinics" all
compare equal.

The negation cue table lives here as well because it is stored in the
same canonical form it is searched in.
"""

from __future__ import annotations

import re
import unicodedata
from typing import List, Tuple

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

# Added to a name's canonical length to form the negation window.
NEGATION_WINDOW_PADDING = 20


def normalize_customer_name(name: object) -> str:
    """Returns the canonical form of ``name`` ('' for non-strings)."""
    if not isinstance(name, str):
        return ""
    return _NON_ALNUM.sub("", unicodedata.normalize("NFKD", name.lower()))


NEGATIVE_CUES: Tuple[str, ...] = tuple(
    normalize_customer_name(cue)
    for cue in (
        "removed",
        "remove",
        "remove from",
        "dropped",
        "drop",
        "dropped from",
        "exclude",
        "excluded",
        "eliminate",
        "eliminated",
        "deprioritize",
        "deprioritized",
        "no longer prioritize",
        "not prioritize",
        "not recommending",
        "no longer recommend",
        "no longer recommending",
    )
)


def find_all_offsets(needle: str, haystack: str) -> List[int]:
    """Start offsets of ``needle`` in ``haystack``.

    Each search resumes right after the end of the previous hit, so hits
    never overlap.
    """
    if not needle:
        return []
    offsets = []
    start = haystack.find(needle)
    while start != -1:
        offsets.append(start)
        start = haystack.find(needle, start + len(needle))
    return offsets
