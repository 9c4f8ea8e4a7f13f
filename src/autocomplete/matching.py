from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from .models import Config, MatchEntry
from .search import search as default_search

log = logging.getLogger(__name__)


def _field(record: Any, key: str) -> Any:
    """record[key] for mappings, attribute lookup otherwise; missing -> None."""
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def is_match(result: Any) -> bool:
    """None / False mean "no match". Anything else, 0 and "" included, is a payload."""
    return result is not None and result is not False


def find_matches(query: Any, data: Sequence[Any], config: Config) -> List[MatchEntry]:
    """
    Scan every record (and every configured key) and collect the matches.

    Entries come out in discovery order: by record index, then by key order.
    There is no early exit at max_results; ranking may still promote a late hit.
    """
    engine = config.search_engine or default_search
    matches: List[MatchEntry] = []

    def check_target(index: int, record: Any, key: Optional[str]) -> None:
        value = record if key is None else _field(record, key)
        if not value:
            return
        result = engine(query, value, config)
        if is_match(result):
            matches.append(MatchEntry(index=index, value=record, match=result, key=key))

    for index, record in enumerate(data):
        if config.key is not None:
            for key in config.key:
                check_target(index, record, key)
        else:
            check_target(index, record, None)

    log.debug("find_matches(%r): %d records scanned, %d matches", query, len(data), len(matches))
    return matches
