from __future__ import annotations

import pytest

from recdelta.delta import DeltaResult
from recdelta.recommender import NO_RECOMMENDATION, run_revisit_flow


def test_flow_reports_removed_customer(customer_table, scripted_generator):
    generate = scripted_generator(
        "I recommend MediCore Clinics, FinSure Partners, and SolarEdge Europe.",
        "Keep MediCore Clinics and FinSure Partners because of their strong YTD spend this year. "
        "SolarEdge Europe is removed because its YTD spend is low.",
    )
    outcome = run_revisit_flow("Which customers should we prioritise?", customer_table, generate=generate)
    assert [c.display for c in outcome.initial_customers] == [
        "MediCore Clinics",
        "FinSure Partners",
        "SolarEdge Europe",
    ]
    assert [c.display for c in outcome.revised_customers] == ["MediCore Clinics", "FinSure Partners"]
    assert outcome.delta == DeltaResult(added=[], removed=["SolarEdge Europe"])
    assert len(generate.prompts) == 2
    assert "Earlier recommendation: I recommend MediCore Clinics" in generate.prompts[1]


def test_flow_reports_added_customer(customer_table, scripted_generator):
    generate = scripted_generator(
        "Start with AgroGrowth BV and ArtisPrint Design.",
        "Add MediCore Clinics alongside AgroGrowth BV and ArtisPrint Design.",
    )
    outcome = run_revisit_flow("Who next?", customer_table, generate=generate)
    assert outcome.delta.to_dict() == {"added": ["MediCore Clinics"], "removed": []}


def test_empty_revisit_falls_back_to_initial_priorities(customer_table, scripted_generator):
    generate = scripted_generator("I recommend MediCore Clinics and FinSure Partners.", "   ")
    outcome = run_revisit_flow("Who first?", customer_table, generate=generate)
    assert "still points to MediCore Clinics and FinSure Partners" in outcome.revised_passage
    assert outcome.delta.is_empty


def test_initial_passage_is_word_capped(customer_table, scripted_generator):
    generate = scripted_generator("Call FinSure Partners then MediCore Clinics today", "Call FinSure Partners.")
    outcome = run_revisit_flow("Who first?", customer_table, generate=generate, word_limit=3)
    assert outcome.initial_passage == "Call FinSure Partners…"
    assert outcome.delta.is_empty


@pytest.mark.parametrize("question", ["", "   ", None])
def test_blank_question_is_rejected(customer_table, scripted_generator, question):
    generate = scripted_generator()
    with pytest.raises(ValueError, match="Please provide a question"):
        run_revisit_flow(question, customer_table, generate=generate)
    assert generate.prompts == []


def test_empty_revisit_after_cue_keeps_initial_customers(customer_table, scripted_generator):
    generate = scripted_generator(
        "I recommend MediCore Clinics because their spend keeps growing every single quarter. "
        "SolarEdge Europe is removed.",
        "",
    )
    outcome = run_revisit_flow("Who first?", customer_table, generate=generate, word_limit=80)
    assert [c.display for c in outcome.initial_customers] == ["MediCore Clinics"]
    assert outcome.revised_customers == outcome.initial_customers
    assert outcome.delta.is_empty


def test_word_limit_comes_from_environment(customer_table, scripted_generator, monkeypatch):
    monkeypatch.setenv("RECDELTA_WORD_LIMIT", "3")
    generate = scripted_generator("Call FinSure Partners then MediCore Clinics today", "Call FinSure Partners.")
    outcome = run_revisit_flow("Who first?", customer_table, generate=generate)
    assert outcome.initial_passage == "Call FinSure Partners…"


def test_empty_first_turn_uses_placeholder(customer_table, scripted_generator):
    generate = scripted_generator("", "Call MediCore Clinics.")
    outcome = run_revisit_flow("Who first?", customer_table, generate=generate, word_limit=80)
    assert outcome.initial_passage == NO_RECOMMENDATION
    assert f"Earlier recommendation: {NO_RECOMMENDATION}" in generate.prompts[1]
    assert outcome.delta.to_dict() == {"added": ["MediCore Clinics"], "removed": []}
