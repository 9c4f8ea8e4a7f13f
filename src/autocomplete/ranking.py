from __future__ import annotations
from functools import cmp_to_key
from typing import Any, List, Sequence

from .matching import find_matches
from .models import Config, MatchEntry


def rank_results(matches: List[MatchEntry], config: Config) -> List[MatchEntry]:
    """Sort with config.sort when set, then keep the first max_results (None keeps all)."""
    ordered = sorted(matches, key=cmp_to_key(config.sort)) if config.sort else list(matches)
    return ordered[:config.max_results]


def list_matching_results(query: Any, data: Sequence[Any], config: Config) -> List[MatchEntry]:
    """Matching engine followed by the ranker: the list a renderer receives."""
    return rank_results(find_matches(query, data, config), config)
