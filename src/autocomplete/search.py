from __future__ import annotations
from typing import Any, List, Optional, Tuple

from . import config as CFG
from .models import Config, MatchResult
from .normalize import fold_and_map, fold_only

# Penalty tables by 1-based position
_REPLACE = {1: 5, 2: 4, 3: 3, 4: 2}
_INSERT_DEL = {1: 10, 2: 8, 3: 6, 4: 4}

Span = Tuple[int, int]


def _replace_penalty(pos1: int) -> int:
    """Penalty for a replacement at 1-based position pos1 (negative)."""
    return -(_REPLACE.get(pos1, 1))


def _insdel_penalty(pos1: int) -> int:
    """Penalty for an insertion or deletion at 1-based position pos1 (negative)."""
    return -(_INSERT_DEL.get(pos1, 2))


def _hamming_one(q: str, t: str) -> Optional[int]:
    """Returns the 1-based position of the differing character, or None if not exactly one."""
    assert len(q) == len(t)
    diff_pos = 0
    for i, (a, b) in enumerate(zip(q, t), start=1):
        if a != b:
            if diff_pos != 0:
                return None
            diff_pos = i
    return diff_pos or None


def _one_added_in_query(q: str, t: str) -> Optional[int]:
    """Returns the 1-based position in query where an extra letter was added, or None if not exactly one."""
    assert len(q) == len(t) + 1
    i = j = 0
    extra_pos: Optional[int] = None
    while i < len(q) and j < len(t):
        if q[i] == t[j]:
            i += 1
            j += 1
        else:
            if extra_pos is not None:
                return None
            extra_pos = i + 1
            i += 1
    if extra_pos is None:
        extra_pos = len(q)
    return extra_pos


def _one_missing_in_query(q: str, t: str) -> Optional[int]:
    """Returns the 1-based position in query where a letter is missing, or None if not exactly one."""
    assert len(q) + 1 == len(t)
    i = j = 0
    gap_pos: Optional[int] = None
    while i < len(q) and j < len(t):
        if q[i] == t[j]:
            i += 1
            j += 1
        else:
            if gap_pos is not None:
                return None
            gap_pos = i + 1
            j += 1
    if gap_pos is None:
        gap_pos = len(q) + 1
    return gap_pos


def _choose_better(cur: Optional[tuple], cand: tuple) -> tuple:
    """Choose the better (score, start, length) window: higher score, then leftmost."""
    if cur is None:
        return cand
    if cand[0] > cur[0]:
        return cand
    if cand[0] == cur[0] and cand[1] < cur[1]:
        return cand
    return cur


def _to_span(mapping: List[int], start: int, length: int) -> Span:
    """Folded window [start, start+length) -> half-open range in the original text."""
    return (mapping[start], mapping[start + length - 1] + 1)


def _merge(indices: List[int]) -> List[Span]:
    """Collapse sorted original indices into contiguous half-open runs."""
    spans: List[Span] = []
    for i in indices:
        if spans and i <= spans[-1][1]:
            spans[-1] = (spans[-1][0], max(spans[-1][1], i + 1))
        else:
            spans.append((i, i + 1))
    return spans


def _strict(q: str, folded: str, mapping: List[int]) -> Optional[Tuple[int, List[Span]]]:
    idx = folded.find(q)
    if idx == -1:
        return None
    return 2 * len(q), [_to_span(mapping, idx, len(q))]


def _loose(q: str, folded: str, mapping: List[int]) -> Optional[Tuple[int, List[Span]]]:
    q = q.replace(" ", "")
    if not q:
        return None
    cursor = 0
    hits: List[int] = []
    for i, ch in enumerate(folded):
        if cursor < len(q) and ch == q[cursor]:
            hits.append(mapping[i])
            cursor += 1
    if cursor < len(q):
        return None
    spans = _merge(sorted(set(hits)))
    return 2 * len(q) - (len(spans) - 1), spans


def _fuzzy(q: str, folded: str, mapping: List[int]) -> Optional[Tuple[int, List[Span]]]:
    exact = _strict(q, folded, mapping)
    if exact is not None:
        return exact

    best: Optional[tuple] = None  # (score, start, win_len)
    qn = len(q)

    # 1-edit: single replacement (a one-letter query would match anything)
    if qn >= 2:
        for i in range(0, len(folded) - qn + 1):
            pos = _hamming_one(q, folded[i:i + qn])
            if pos is None:
                continue
            best = _choose_better(best, (2 * (qn - 1) + _replace_penalty(pos), i, qn))

    # 1-edit: added letter in query
    if qn >= 2 and len(folded) >= qn - 1:
        L = qn - 1
        for i in range(0, len(folded) - L + 1):
            pos = _one_added_in_query(q, folded[i:i + L])
            if pos is None:
                continue
            best = _choose_better(best, (2 * L + _insdel_penalty(pos), i, L))

    # 1-edit: missing letter in query
    if len(folded) >= qn + 1:
        L = qn + 1
        for i in range(0, len(folded) - L + 1):
            pos = _one_missing_in_query(q, folded[i:i + L])
            if pos is None:
                continue
            best = _choose_better(best, (2 * qn + _insdel_penalty(pos), i, L))

    if best is None:
        return None
    score, start, win_len = best
    return score, [_to_span(mapping, start, win_len)]


_MODES = {"strict": _strict, "loose": _loose, "fuzzy": _fuzzy}


def mark(text: str, spans: List[Span], tag: str = CFG.HIGHLIGHT_TAG) -> str:
    """Wrap each [start, end) span of text in <tag>…</tag>."""
    out: List[str] = []
    last = 0
    for start, end in spans:
        out.append(text[last:start])
        out.append(f"<{tag}>{text[start:end]}</{tag}>")
        last = end
    out.append(text[last:])
    return "".join(out)


def search(query: Any, value: Any, config: Config) -> Optional[MatchResult]:
    """
    Default matching algorithm: compare the query against str(value).

    Returns a MatchResult (score, spans in the original text, display text) or
    None when the value does not match under config.mode.
    """
    q = fold_only(str(query), config.diacritics)
    if not q:
        return None
    record = str(value)
    folded, mapping = fold_and_map(record, config.diacritics)
    hit = _MODES[config.mode](q, folded, mapping)
    if hit is None:
        return None
    score, spans = hit
    text = mark(record, spans) if config.highlight else record
    return MatchResult(score=int(score), spans=tuple(spans), text=text)
