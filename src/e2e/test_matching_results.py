# src/e2e/test_matching_results.py

import pytest

from autocomplete.matching import find_matches
from autocomplete.models import Config, MatchEntry, MatchResult
from autocomplete.ranking import list_matching_results

FRUIT = [{"name": "Apple"}, {"name": "Banana"}]


@pytest.mark.e2e
def test_keyed_default_search_finds_apple_only():
    out = list_matching_results("ap", FRUIT, Config(key=["name"]))
    assert len(out) == 1
    entry = out[0]
    assert (entry.key, entry.index, entry.value) == ("name", 0, {"name": "Apple"})
    assert isinstance(entry.match, MatchResult)
    assert entry.match.spans == ((0, 2),)
    assert list(entry.to_dict()) == ["key", "index", "match", "value"]


@pytest.mark.e2e
def test_custom_engine_returning_none_yields_nothing():
    calls = []

    def never(query, value, config):
        calls.append(value)
        return None

    assert list_matching_results("ap", FRUIT, Config(search_engine=never)) == []
    # whole records were searched, one call each
    assert calls == FRUIT


@pytest.mark.e2e
def test_unkeyed_entries_have_no_key():
    data = ["apple pie", "apricot", "banana"]
    out = list_matching_results("ap", data, Config(max_results=None))
    assert [e.index for e in out] == [0, 1]
    assert all(e.key is None for e in out)
    assert all("key" not in e.to_dict() for e in out)


@pytest.mark.e2e
def test_each_matching_key_contributes_its_own_entry():
    data = [{"first": "Ann", "last": "Annis"}, {"first": "Bob", "last": "Kann"}]
    out = find_matches("ann", data, Config(key=["last", "first"]))
    assert [(e.index, e.key) for e in out] == [(0, "last"), (0, "first"), (1, "last")]
    assert all(e.key in ("last", "first") for e in out)


@pytest.mark.e2e
def test_missing_or_falsy_fields_are_skipped_without_calling_engine():
    seen = []

    def spy(query, value, config):
        seen.append(value)
        return {"hit": True}

    data = [{"name": ""}, {"other": "x"}, {"name": None}, {"name": "ok"}, None, "plain"]
    out = find_matches("q", data, Config(key=["name"], search_engine=spy))
    assert seen == ["ok"]
    assert [e.index for e in out] == [3]


@pytest.mark.e2e
def test_object_records_are_matched_by_attribute():
    class Item:
        def __init__(self, title):
            self.title = title

    data = [Item("Graph"), Item("Tree")]
    out = find_matches("gra", data, Config(key=["title"]))
    assert [e.index for e in out] == [0]
    assert out[0].value is data[0]


@pytest.mark.e2e
def test_zero_valued_match_is_still_a_match():
    out = find_matches("x", ["a", "b"], Config(search_engine=lambda q, v, c: 0))
    assert [e.match for e in out] == [0, 0]


@pytest.mark.e2e
def test_false_means_no_match():
    out = find_matches("x", ["a", "b"], Config(search_engine=lambda q, v, c: v == "b" or False))
    assert [e.index for e in out] == [1]


@pytest.mark.e2e
def test_engine_receives_query_value_and_config():
    cfg = Config(search_engine=lambda q, v, c: (q, v, c))
    out = find_matches("qq", ["rec"], cfg)
    assert out[0].match == ("qq", "rec", cfg)


@pytest.mark.e2e
def test_engine_errors_propagate():
    def boom(q, v, c):
        raise RuntimeError("engine down")

    with pytest.raises(RuntimeError, match="engine down"):
        list_matching_results("a", ["a"], Config(search_engine=boom))


@pytest.mark.e2e
def test_scan_is_idempotent():
    data = [{"name": n} for n in ("alpha", "alps", "beta", "palace")]
    cfg = Config(key=["name"], mode="loose", max_results=None)
    assert find_matches("al", data, cfg) == find_matches("al", data, cfg)


@pytest.mark.e2e
def test_full_scan_even_past_max_results():
    seen = []

    def spy(q, v, c):
        seen.append(v)
        return v

    data = ["a", "b", "c", "d"]
    out = list_matching_results("x", data, Config(search_engine=spy, max_results=1))
    assert seen == data
    assert out == [MatchEntry(index=0, value="a", match="a")]


@pytest.mark.e2e
def test_empty_key_list_matches_nothing():
    assert find_matches("ap", ["apple"], Config(key=[])) == []
    assert find_matches("ap", [{"name": "apple"}], Config(key=())) == []
