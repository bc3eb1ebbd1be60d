from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List

import pytest

from recdelta.data_generation import save_customer_csv
from recdelta.data_loading import load_customer_table

SCENARIO_CUSTOMERS: List[Dict[str, str]] = [
    {"Customer ID": "C1001", "Customer Name": "MediCore Clinics", "YTD Purchases": "184250.00"},
    {"Customer ID": "C1002", "Customer Name": "FinSure Partners", "YTD Purchases": "152900.50"},
    {"Customer ID": "C1003", "Customer Name": "SolarEdge Europe", "YTD Purchases": "23400.75"},
    {"Customer ID": "C1004", "Customer Name": "AgroGrowth BV", "YTD Purchases": "98120.00"},
    {"Customer ID": "C1005", "Customer Name": "ArtisPrint Design", "YTD Purchases": "64310.20"},
]


@pytest.fixture
def customer_csv(tmp_path: Path) -> str:
    path = tmp_path / "customers.csv"
    save_customer_csv(SCENARIO_CUSTOMERS, filename=str(path))
    return str(path)


@pytest.fixture
def customer_table(customer_csv: str):
    return load_customer_table(customer_csv)


@pytest.fixture
def customer_names() -> List[str]:
    return [row["Customer Name"] for row in SCENARIO_CUSTOMERS]


class ScriptedGenerator:
    """Returns canned replies in order and records the prompts it saw."""

    def __init__(self, *replies: str) -> None:
        self.replies = list(replies)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.replies.pop(0)


@pytest.fixture
def scripted_generator() -> Callable[..., ScriptedGenerator]:
    return ScriptedGenerator
