"""
data_loading.py
===============

Loads the customer table the recommendations are made from.  The table is
a semicolon-delimited CSV with at least a customer name column; the YTD
purchase column is optional and only used for prompts.
"""

from __future__ import annotations

import logging
from typing import List

import pandas as pd

logger = logging.getLogger(__name__)

NAME_COLUMN = "Customer Name"
YTD_COLUMN = "YTD Purchases"


def load_customer_table(path: str, sep: str = ";", name_column: str = NAME_COLUMN) -> pd.DataFrame:
    # keep_default_na=False so a customer literally called "NA" survives
    df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip() for c in df.columns]
    if name_column not in df.columns:
        raise ValueError(f"customer table missing {{{name_column!r}}}")
    df[name_column] = df[name_column].str.strip()
    if YTD_COLUMN in df.columns:
        df[YTD_COLUMN] = pd.to_numeric(
            df[YTD_COLUMN].str.replace(",", "", regex=False), errors="coerce"
        )
    logger.info("Loaded %d customer rows from %s", len(df), path)
    return df


def customer_names_from_table(df: pd.DataFrame, name_column: str = NAME_COLUMN) -> List[str]:
    """Non-blank names in table order; duplicates are kept."""
    if name_column not in df.columns:
        raise ValueError(f"customer table missing {{{name_column!r}}}")
    return [name.strip() for name in df[name_column].tolist() if isinstance(name, str) and name.strip()]


def load_customer_names(path: str, sep: str = ";", name_column: str = NAME_COLUMN) -> List[str]:
    return customer_names_from_table(load_customer_table(path, sep=sep, name_column=name_column), name_column)
