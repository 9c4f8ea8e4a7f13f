"""Flask web surface for the autocomplete engine (``python -m frontend --data records.json``)."""
