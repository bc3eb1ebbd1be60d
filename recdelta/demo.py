"""
demo.py
=======

Standalone scenario runner for the customer delta.

Loads the customer list, runs a fixed set of initial/revised passages
through the extractor and the delta engine, and prints which customers
were added or removed.  Run it with ``python -m recdelta.demo [csv_path]``.
"""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, Sequence

from .config import configure_logging, load_settings
from .data_loading import load_customer_names
from .delta import DeltaResult, format_delta, run_scenario

SCENARIOS: List[Dict[str, str]] = [
    {
        "label": "Removal noted explicitly",
        "initial": (
            "I recommend MediCore Clinics, FinSure Partners, and SolarEdge Europe because of their "
            "steady performance and purchase volumes."
        ),
        "revised": (
            "Revisiting my earlier recommendation. I would prioritize MediCore Clinics and FinSure Partners "
            "due to their high YTD spend. SolarEdge Europe is removed as its YTD purchase amount is "
            "significantly lower."
        ),
    },
    {
        "label": "New customer added",
        "initial": "Start with AgroGrowth BV and ArtisPrint Design for their growth potential.",
        "revised": "Updating my view: add MediCore Clinics alongside AgroGrowth BV and ArtisPrint Design.",
    },
]


def run_scenarios(
    csv_path: Optional[str] = None,
    scenarios: Sequence[Dict[str, str]] = SCENARIOS,
) -> List[DeltaResult]:
    if csv_path is None:
        csv_path = load_settings().customer_csv
    customer_names = load_customer_names(csv_path)
    results = []
    for scenario in scenarios:
        delta = run_scenario(scenario["initial"], scenario["revised"], customer_names)
        print(f"\nScenario: {scenario['label']}")
        print("  Initial:", scenario["initial"])
        print("  Revised:", scenario["revised"])
        for line in format_delta(delta):
            print(f"  {line}")
        results.append(delta)
    return results


if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    run_scenarios(sys.argv[1] if len(sys.argv) > 1 else settings.customer_csv)
