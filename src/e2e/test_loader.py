# src/e2e/test_loader.py

import asyncio
from pathlib import Path

import pytest

from autocomplete.loader import load_records, load_records_async


@pytest.mark.e2e
def test_json_array(tmp_path: Path):
    p = tmp_path / "r.json"
    p.write_text('[{"name": "a"}, "b", 3]', encoding="utf-8")
    assert load_records(str(p)) == [{"name": "a"}, "b", 3]


@pytest.mark.e2e
def test_json_object_with_data_list(tmp_path: Path):
    p = tmp_path / "r.json"
    p.write_text('{"data": ["x", "y"]}', encoding="utf-8")
    assert load_records(str(p)) == ["x", "y"]


@pytest.mark.e2e
def test_json_that_is_not_a_list_is_rejected(tmp_path: Path):
    p = tmp_path / "r.json"
    p.write_text('{"name": "a"}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_records(str(p))


@pytest.mark.e2e
def test_jsonl_and_csv(tmp_path: Path):
    jl = tmp_path / "r.jsonl"
    jl.write_text('{"n": 1}\n\n{"n": 2}\n', encoding="utf-8")
    assert load_records(str(jl)) == [{"n": 1}, {"n": 2}]

    csv_path = tmp_path / "r.csv"
    csv_path.write_text("name,color\nApple,red\nLime,green\n", encoding="utf-8")
    assert load_records(str(csv_path)) == [
        {"name": "Apple", "color": "red"},
        {"name": "Lime", "color": "green"},
    ]


@pytest.mark.e2e
def test_text_lines_skip_blanks(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("  alpha \n\nbeta\n   \ngamma\n", encoding="utf-8")
    assert load_records(str(p)) == ["alpha", "beta", "gamma"]


@pytest.mark.e2e
def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_records(str(tmp_path / "nope.json"))


@pytest.mark.e2e
def test_async_loader_matches_sync(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("one\ntwo\n", encoding="utf-8")
    assert asyncio.run(load_records_async(str(p))) == load_records(str(p))
