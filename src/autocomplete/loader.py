"""
Record Loading Module

Reads a candidate record collection from a file on disk so that the CLI, the
web frontend and the desktop app have something to search. The pipeline
itself never touches files; it only receives the resolved collection.

Supported formats (chosen by extension):
    .json   top-level array, or an object holding the array under "data"
    .jsonl  one JSON value per line
    .csv    one dict per row (header line gives the field names)
    other   UTF-8 text, one record per non-empty line (stripped)

Key Functions:
    load_records(path): Read and return the records
    load_records_async(path): Same read, off the event loop (a deferred data source)

Author: Google Team 4
"""

# src/autocomplete/loader.py
from __future__ import annotations
import asyncio
import csv
import json
import logging
import os
from typing import Any, List

from .config import ENCODING

log = logging.getLogger(__name__)


def _read_json(path: str) -> List[Any]:
    with open(path, "r", encoding=ENCODING) as f:
        payload = json.load(f)
    if isinstance(payload, dict) and "data" in payload:
        payload = payload["data"]
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON array of records, got {type(payload).__name__}")
    return payload


def _read_jsonl(path: str) -> List[Any]:
    with open(path, "r", encoding=ENCODING) as f:
        return [json.loads(ln) for ln in f if ln.strip()]


def _read_csv(path: str) -> List[Any]:
    with open(path, "r", encoding=ENCODING, newline="") as f:
        return [dict(row) for row in csv.DictReader(f)]


def _read_lines(path: str) -> List[Any]:
    with open(path, "r", encoding=ENCODING, errors="ignore") as f:
        return [ln.strip() for ln in f if ln.strip()]


_READERS = {".json": _read_json, ".jsonl": _read_jsonl, ".csv": _read_csv}


def load_records(path: str) -> List[Any]:
    """
    Load the record collection stored at `path`.

    Args:
        path: File to read; the extension selects the format.

    Returns:
        List of records in file order (a record's position is its index).

    Raises:
        FileNotFoundError: If `path` does not exist.
        ValueError: If a .json file does not hold an array of records.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    ext = os.path.splitext(path)[1].lower()
    records = _READERS.get(ext, _read_lines)(path)
    log.info("Loaded %d records from %s", len(records), path)
    return records


async def load_records_async(path: str) -> List[Any]:
    """load_records() in a worker thread, so it can serve as a deferred data source."""
    return await asyncio.to_thread(load_records, path)
