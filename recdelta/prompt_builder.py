"""
prompt_builder.py
=================

Functions to create the recommendation and revisit prompts from the
customer table, and to generate the passages with an OpenAI chat model.
Also holds the small text helpers used to present a passage (word cap)
and to build the fallback revisit summary.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import pandas as pd
from openai import OpenAI

from .data_loading import NAME_COLUMN, YTD_COLUMN

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are Sales Agent 1, a concise B2B sales recommender."


class RecommendationError(RuntimeError):
    """Raised when the text-generation backend fails to produce a passage."""


def _customer_lines(customer_table: pd.DataFrame, max_customers: int) -> List[str]:
    df = customer_table
    if YTD_COLUMN in df.columns:
        df = df.sort_values(by=YTD_COLUMN, ascending=False, na_position="last")
    lines = []
    for _, row in df.head(max_customers).iterrows():
        ytd = row.get(YTD_COLUMN)
        if ytd is not None and pd.notna(ytd):
            lines.append(f"- {row[NAME_COLUMN]} (YTD purchases: {float(ytd):,.2f})")
        else:
            lines.append(f"- {row[NAME_COLUMN]}")
    return lines


def build_recommendation_prompt(question: str, customer_table: pd.DataFrame, max_customers: int = 50) -> str:
    """Constructs the first-turn prompt listing the known customers."""
    lines = []
    lines.append("Given the sales question and the customer list below, recommend which customers to prioritise and explain why.")
    lines.append(f"Question: {question}\n")
    lines.append("Customers:")
    lines.extend(_customer_lines(customer_table, max_customers))
    lines.append("\nInstructions: Only name customers from the list, spelled exactly as listed. Respond in at most three sentences.")
    return "\n".join(lines)


def build_revisit_prompt(question: str, initial_passage: str, customer_table: pd.DataFrame, max_customers: int = 50) -> str:
    """Constructs the second-turn prompt asking the model to reconsider."""
    lines = []
    lines.append("Revisit your earlier recommendation against the customer data and state your final prioritisation.")
    lines.append(f"Question: {question}")
    lines.append(f"Earlier recommendation: {initial_passage}\n")
    lines.append("Customers:")
    lines.extend(_customer_lines(customer_table, max_customers))
    lines.append(
        "\nInstructions: Name every customer you keep. If you drop a customer, say explicitly that it is removed "
        "and why. If you add a customer, say so. Only name customers from the list, spelled exactly as listed."
    )
    return "\n".join(lines)


def apply_word_cap(text: Optional[str], limit: int = 80) -> str:
    if not text:
        return ""
    words = text.split()
    if len(words) <= limit:
        return text.strip()
    return " ".join(words[:limit]) + "…"


def summarize_priorities(bullets: Optional[Sequence[str]] = None) -> str:
    """Joins up to three bullets as 'a, b and c'."""
    items = [b for b in (bullets or []) if b][:3]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} and {items[-1]}"


def build_revisit_summary(base_summary: str = "", bullets: Optional[Sequence[str]] = None) -> str:
    """Deterministic revisit text used when the model has nothing to add."""
    trimmed = (base_summary or "").strip()
    prioritized = summarize_priorities(bullets)
    if trimmed and prioritized:
        return (
            f'Revisiting the first suggestion ("{trimmed}"), the data still points to {prioritized}, '
            "so stay with that prioritization because it best fits the evidence."
        )
    if trimmed:
        return f'After reassessing the initial recommendation ("{trimmed}"), stay with that prioritization because it best fits the evidence.'
    if prioritized:
        return f"After reflecting on the data, {prioritized} remain the strongest candidates."
    return "After reflecting on the available data, continue with the suggested priorities."


def generate_openai_response(
    prompt: str,
    model: str = "gpt-4o",
    api_key: Optional[str] = None,
    client: Any = None,
    temperature: float = 0.2,
    max_tokens: int = 512,
) -> str:
    """Generates a passage using an OpenAI chat model.

    Parameters
    ----------
    prompt : str
        The instruction and context to send to the model.
    model : str, default='gpt-4o'
        Name of the OpenAI model to use.
    api_key : str, optional
        OpenAI API key.  Required unless ``client`` is given.
    client : optional
        A ready ``openai.OpenAI`` client (or anything with the same
        ``chat.completions.create`` method).

    Returns
    -------
    str
        The assistant's reply, stripped.  Empty if the model returned no
        content.
    """
    if client is None:
        if not api_key:
            raise ValueError("An OpenAI API key must be provided via argument or OPENAI_API_KEY env var.")
        client = OpenAI(api_key=api_key)
    try:
        resp = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except Exception as e:
        logger.error("LLM call failed: %s", e)
        raise RecommendationError(f"LLM call to {model} failed") from e
    content = resp.choices[0].message.content
    return (content or "").strip()
