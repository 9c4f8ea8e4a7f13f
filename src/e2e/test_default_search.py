# src/e2e/test_default_search.py

import pytest

from autocomplete.models import Config
from autocomplete.search import search


@pytest.mark.e2e
def test_strict_is_case_insensitive_substring():
    m = search("ap", "Apple", Config())
    assert m is not None
    assert m.score == 4
    assert m.spans == ((0, 2),)
    assert m.text == "Apple"
    assert search("ap", "Banana", Config()) is None


@pytest.mark.e2e
def test_strict_picks_leftmost_occurrence():
    m = search("na", "Banana", Config())
    assert m.spans == ((2, 4),)


@pytest.mark.e2e
def test_empty_query_never_matches():
    assert search("", "anything", Config()) is None


@pytest.mark.e2e
def test_non_string_values_are_compared_as_text():
    m = search("42", 1420, Config())
    assert m is not None and m.spans == ((1, 3),)


@pytest.mark.e2e
def test_highlight_wraps_span_in_mark():
    m = search("nan", "Banana", Config(highlight=True))
    assert m.text == "Ba<mark>nan</mark>a"


@pytest.mark.e2e
def test_diacritics_folding_is_opt_in():
    assert search("cafe", "Café con leche", Config()) is None
    m = search("cafe", "Café con leche", Config(diacritics=True))
    assert m is not None and m.spans == ((0, 4),)


@pytest.mark.e2e
def test_loose_matches_letters_in_order():
    m = search("apl", "Apple", Config(mode="loose"))
    assert m is not None
    # "Ap" then "l": two runs, one gap
    assert m.spans == ((0, 2), (3, 4))
    assert m.score == 2 * 3 - 1
    assert search("pa", "Apple", Config(mode="loose")) is None


@pytest.mark.e2e
def test_loose_ignores_spaces_in_query():
    m = search("g b", "gumbo", Config(mode="loose", highlight=True))
    assert m is not None
    assert m.text == "<mark>g</mark>um<mark>b</mark>o"


@pytest.mark.e2e
def test_contiguous_loose_match_outscores_scattered():
    tight = search("ban", "banner", Config(mode="loose"))
    loose = search("ban", "bravo an", Config(mode="loose"))
    assert tight.score > loose.score


@pytest.mark.e2e
def test_fuzzy_prefers_exact_substring():
    m = search("apple", "apple pie", Config(mode="fuzzy"))
    assert m.score == 10


@pytest.mark.e2e
def test_fuzzy_single_replacement_penalty_by_position():
    # replace at pos 2: 2*(5-1) - 4
    m = search("axple", "apple", Config(mode="fuzzy"))
    assert m is not None
    assert m.score == 4
    assert m.spans == ((0, 5),)


@pytest.mark.e2e
def test_fuzzy_missing_letter_in_query():
    # "aple" is missing one "p": window "apple", gap at pos 3 -> 2*4 - 6
    m = search("aple", "an apple", Config(mode="fuzzy"))
    assert m is not None
    assert m.score == 2


@pytest.mark.e2e
def test_fuzzy_rejects_two_edits():
    assert search("axxle", "apple", Config(mode="fuzzy")) is None


@pytest.mark.e2e
def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        Config(mode="regex")
