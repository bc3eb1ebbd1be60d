"""Customer mention extraction and revisit deltas for recommendation passages."""

from .conversation_parser import EntityName, extract_customers
from .delta import DeltaResult, compute_delta, run_scenario
from .normalization import NEGATIVE_CUES, find_all_offsets, normalize_customer_name

__all__ = [
    "DeltaResult",
    "EntityName",
    "NEGATIVE_CUES",
    "compute_delta",
    "extract_customers",
    "find_all_offsets",
    "normalize_customer_name",
    "run_scenario",
]
