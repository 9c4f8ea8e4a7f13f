# src/autocomplete/models.py
"""
Data models for the autocomplete pipeline.

This module defines the small containers that flow through one pipeline
invocation:

- Config: the read-only options bundle (keys, matching function, sort, caps).
- Trigger / Query: optional capabilities that gate and rewrite the query.
- MatchResult: the payload produced by the default matching algorithm.
- MatchEntry: the exact result object handed to renderers.

These classes do not contain business logic beyond validating their own
fields; loading, matching and ranking live in their own modules.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from . import config as CFG


class SearchEngine(Protocol):
    """A matching function: returns a match payload, or None for "no match"."""

    def __call__(self, query: Any, value: Any, config: "Config") -> Any: ...


Comparator = Callable[["MatchEntry", "MatchEntry"], float]


@dataclass(frozen=True, slots=True)
class Config:
    """
    Options recognized by the matching engine and the result ranker.

    Attributes
    ----------
    key : Optional[Tuple[str, ...]]
        Field names matched on every record, in order. None matches the whole
        record once. A single string is accepted as a one-key tuple.
    search_engine : Optional[SearchEngine]
        Custom matching function used instead of the default algorithm.
    sort : Optional[Comparator]
        Comparator over two MatchEntry values, negative meaning a before b.
    max_results : Optional[int]
        Cap on returned entries. None means no slicing limit.
    threshold : int
        Minimum effective-query length for the default trigger rule.
    mode : str
        Default algorithm mode: "strict", "loose" or "fuzzy".
    diacritics : bool
        Fold accents away before comparing (default algorithm only).
    highlight : bool
        Wrap matched spans in MatchResult.text (default algorithm only).
    """
    key: Optional[Tuple[str, ...]] = None
    search_engine: Optional[SearchEngine] = None
    sort: Optional[Comparator] = None
    max_results: Optional[int] = CFG.MAX_RESULTS
    threshold: int = CFG.THRESHOLD
    mode: str = CFG.SEARCH_MODE
    diacritics: bool = CFG.DIACRITICS
    highlight: bool = CFG.HIGHLIGHT

    def __post_init__(self) -> None:
        if self.key is not None:
            keys = (self.key,) if isinstance(self.key, str) else tuple(self.key)
            object.__setattr__(self, "key", keys)
        if self.max_results is not None and self.max_results < 0:
            raise ValueError(f"max_results must be >= 0 or None, got {self.max_results!r}")
        if self.threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {self.threshold!r}")
        if self.mode not in CFG.MODES:
            raise ValueError(f"unknown search mode {self.mode!r}; expected one of {CFG.MODES}")


@dataclass(frozen=True, slots=True)
class Trigger:
    """When `condition` is set it fully decides eligibility; threshold is ignored."""
    condition: Optional[Callable[[Any], bool]] = None


@dataclass(frozen=True, slots=True)
class Query:
    """`manipulate` rewrites the normalized input into the effective query."""
    manipulate: Optional[Callable[[Any], Any]] = None


@dataclass(frozen=True, slots=True)
class MatchResult:
    """
    What the default matching algorithm returns for a hit.

    Attributes
    ----------
    score : int
        Deterministic match quality; higher is better. 2 per matched
        character, minus gap or edit penalties depending on the mode.
    spans : Tuple[Tuple[int, int], ...]
        Half-open [start, end) ranges of the matched characters in the
        ORIGINAL text (not the folded form).
    text : str
        The matched value as text, with spans wrapped in highlight tags when
        highlighting is enabled.
    """
    score: int
    spans: Tuple[Tuple[int, int], ...]
    text: str


@dataclass(frozen=True, slots=True)
class MatchEntry:
    """
    One surfaced result.

    `index` is the record's position in the input collection and survives
    sorting and truncation. `key` is set only when field-keyed matching ran.
    """
    index: int
    value: Any
    match: Any
    key: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.key is not None:
            out["key"] = self.key
        out["index"] = self.index
        out["match"] = asdict(self.match) if is_dataclass(self.match) else self.match
        out["value"] = self.value
        return out
