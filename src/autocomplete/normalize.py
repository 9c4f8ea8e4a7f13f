from __future__ import annotations
import unicodedata
from typing import Any, List, Optional, Protocol, Union, runtime_checkable

from .models import Query


@runtime_checkable
class TextField(Protocol):
    """Text-value holder (entry / text area): exposes its text as `value`."""
    value: str


@runtime_checkable
class Element(Protocol):
    """Any other element: exposes its rendered text as `text_content`."""
    text_content: str


InputField = Union[str, TextField, Element]


def get_input_value(field: InputField) -> str:
    """Return the field's current text, lowercased. A plain str passes straight through."""
    if isinstance(field, str):
        return field.lower()
    if isinstance(field, TextField):
        return field.value.lower()
    return field.text_content.lower()


def prepare_query_value(input_value: str, query: Optional[Query] = None) -> Any:
    """Effective query: query.manipulate(input_value) when set, else input_value unchanged."""
    if query is not None and query.manipulate is not None:
        return query.manipulate(input_value)
    return input_value


def _fold_char(ch: str, diacritics: bool) -> str:
    out = ch.casefold()
    if diacritics:
        out = "".join(c for c in unicodedata.normalize("NFD", out) if not unicodedata.combining(c))
    return out


def fold_and_map(text: str, diacritics: bool = False) -> tuple[str, List[int]]:
    """
    Fold text for matching and return:
      - folded string (casefolded; accents stripped when diacritics=True)
      - mapping list: folded index -> original index (in the ORIGINAL string)
    Rules:
      * one original char may fold to several ("ß" -> "ss"); all of them map back to it
      * a char that folds to nothing (a lone combining mark) is dropped from matching
    """
    out_chars: list[str] = []
    mapping: List[int] = []
    for orig_i, ch in enumerate(text):
        for c in _fold_char(ch, diacritics):
            out_chars.append(c)
            mapping.append(orig_i)
    return "".join(out_chars), mapping


def fold_only(text: str, diacritics: bool = False) -> str:
    """Convenience: fold and return only the folded string."""
    return "".join(_fold_char(ch, diacritics) for ch in text)
