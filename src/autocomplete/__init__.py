"""
Autocomplete Pipeline Module

This module provides the matching-and-ranking core of an autocomplete widget.
Given the text typed into an input field and a candidate record collection it
decides whether the query should trigger a search, which records match under
a pluggable matching algorithm, and in what order and how many to surface.

The module is designed with a clean separation of concerns:
- Query normalization and manipulation
- Trigger evaluation (threshold rule or custom condition)
- Matching (default strict/loose/fuzzy algorithm or a custom function)
- Ranking and truncation
- Async resolution of the data source

Main Functions:
    Engine(config).load(source) / .complete(field): the whole pipeline
    list_matching_results(query, data, config): matching + ranking only
    check_trigger_condition(trigger, query, threshold): eligibility gate

Example Usage:
    import asyncio
    from autocomplete import Config, Engine

    engine = Engine(Config(key=["name"], max_results=3))
    asyncio.run(engine.load([{"name": "Apple"}, {"name": "Banana"}]))

    for entry in engine.complete("ap"):
        print(entry.index, entry.key, entry.match.score)

Author: Google Team 4
Version: 1.0.0
"""

# src/autocomplete/__init__.py
from .data import prepare_data, resolve_data
from .engine import Engine
from .matching import find_matches
from .models import Config, MatchEntry, MatchResult, Query, Trigger
from .normalize import get_input_value, prepare_query_value
from .ranking import list_matching_results, rank_results
from .search import search
from .trigger import check_trigger_condition

__version__ = "1.0.0"
__author__ = "Google Team 4"
__all__ = [
    "Engine",
    "Config", "Trigger", "Query", "MatchEntry", "MatchResult",
    "prepare_data", "resolve_data",
    "get_input_value", "prepare_query_value",
    "check_trigger_condition",
    "find_matches", "rank_results", "list_matching_results",
    "search",
]
