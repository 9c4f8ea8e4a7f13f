# src/autocomplete/engine.py
from __future__ import annotations

import dataclasses
import logging
from typing import Any, List, Optional, Sequence

from . import config as CFG
from .data import prepare_data
from .models import Config, MatchEntry, Query, Trigger
from .normalize import InputField, get_input_value, prepare_query_value
from .ranking import list_matching_results
from .trigger import check_trigger_condition

log = logging.getLogger(__name__)

_KEEP = object()


class Engine:
    """
    Thin orchestration layer that glues together:
      - the async data adapter (data.prepare_data),
      - query normalization and manipulation (normalize),
      - the trigger gate (trigger.check_trigger_condition),
      - matching + ranking (ranking.list_matching_results).

    Public API (used by CLI/Flask/GUI):
      * load(source):     resolve the data source -> attach records
      * complete(field):  return ranked MatchEntry list for the field's text
      * start(field, source): load + complete in one call
      * count():          number of attached records

    Each complete() call is a fresh linear scan; nothing is cached between
    calls except the attached record collection.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        trigger: Optional[Trigger] = None,
        query: Optional[Query] = None,
        verbose: bool = False,
    ) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
        self.config = config or Config()
        self.trigger = trigger
        self.query = query
        self._records: Optional[Sequence[Any]] = None

    # /* ~~~ Resolve a data source (list, awaitable or callable) and attach it ~~~ */
    async def load(self, source: Any) -> None:
        log.info("Resolving data source")
        await prepare_data(source, self._attach_records)

    @property
    def records(self) -> Sequence[Any]:
        if self._records is None:
            raise RuntimeError("Engine has no records. Call load() first.")
        return self._records

    def count(self) -> int:
        return len(self._records) if self._records is not None else 0

    # ------------- query -------------

    # /* ~~~ Run the pipeline for the field's current text and return ranked entries ~~~ */
    def complete(self, field: InputField, *, max_results: Any = _KEEP) -> List[MatchEntry]:
        records = self.records
        config = self.config
        if max_results is not _KEEP:
            config = dataclasses.replace(config, max_results=max_results)

        query_value = prepare_query_value(get_input_value(field), self.query)
        if not check_trigger_condition(self.trigger, query_value, config.threshold):
            log.debug("Query %r not eligible; skipping match", query_value)
            return []
        return list_matching_results(query_value, records, config)

    async def start(self, field: InputField, source: Any) -> List[MatchEntry]:
        await self.load(source)
        return self.complete(field)

    # ------------- internals -------------

    def _attach_records(self, data: Sequence[Any]) -> None:
        self._records = data
        log.info("Attached data source: %d records", len(data))
