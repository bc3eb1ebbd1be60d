"""
recommender.py
==============

This module orchestrates the two-turn recommendation flow: Sales Agent 1
answers a question, then revisits its own answer, and the customers that
changed between the two turns are reported as a delta.  The text
generation backend is injected as a plain callable so the flow can run
against OpenAI or against a canned responder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import pandas as pd

from .config import Settings, load_settings
from .conversation_parser import EntityName, extract_customers
from .data_loading import customer_names_from_table
from .delta import DeltaResult, compute_delta
from .prompt_builder import (
    apply_word_cap,
    build_recommendation_prompt,
    build_revisit_prompt,
    build_revisit_summary,
    generate_openai_response,
)

logger = logging.getLogger(__name__)

Generator = Callable[[str], str]

NO_RECOMMENDATION = "no recommendations available at this time."


@dataclass
class RevisitOutcome:
    question: str
    initial_passage: str
    revised_passage: str
    initial_customers: List[EntityName]
    revised_customers: List[EntityName]
    delta: DeltaResult


def openai_generator(settings: Optional[Settings] = None) -> Generator:
    """Returns a generator bound to the configured OpenAI model."""
    settings = settings or load_settings()

    def generate(prompt: str) -> str:
        return generate_openai_response(prompt, model=settings.model, api_key=settings.openai_api_key)

    return generate


def run_revisit_flow(
    question: str,
    customer_table: pd.DataFrame,
    generate: Optional[Generator] = None,
    word_limit: Optional[int] = None,
) -> RevisitOutcome:
    """Runs both turns for ``question`` and returns passages, customers and delta.

    ``generate`` defaults to the configured OpenAI model and ``word_limit``
    to ``RECDELTA_WORD_LIMIT``.
    """
    question = (question or "").strip()
    if not question:
        raise ValueError("Please provide a question to run the flow.")
    if generate is None or word_limit is None:
        settings = load_settings()
        if generate is None:
            generate = openai_generator(settings)
        if word_limit is None:
            word_limit = settings.word_limit
    customer_names = customer_names_from_table(customer_table)

    initial_passage = apply_word_cap(generate(build_recommendation_prompt(question, customer_table)), word_limit)
    if not initial_passage:
        initial_passage = NO_RECOMMENDATION
    initial_customers = extract_customers(initial_passage, customer_names)
    logger.info("Initial recommendation names %d customers", len(initial_customers))

    revised_passage = apply_word_cap(generate(build_revisit_prompt(question, initial_passage, customer_table)), word_limit)
    if revised_passage:
        revised_customers = extract_customers(revised_passage, customer_names)
    else:
        logger.warning("Revisit turn returned no text; keeping the initial prioritisation")
        # summary quotes the initial passage verbatim; its customers carry over as-is
        revised_customers = list(initial_customers)
        revised_passage = build_revisit_summary(
            initial_passage, [entity.display for entity in initial_customers]
        )

    delta = compute_delta(initial_customers, revised_customers)
    logger.info("Revisit delta: %d added, %d removed", len(delta.added), len(delta.removed))
    return RevisitOutcome(
        question=question,
        initial_passage=initial_passage,
        revised_passage=revised_passage,
        initial_customers=initial_customers,
        revised_customers=revised_customers,
        delta=delta,
    )
