from __future__ import annotations
import os

# results cap when a Config does not set one (None = unbounded)
MAX_RESULTS: int = 5

# minimum effective-query length for the default trigger rule
THRESHOLD: int = 1

# default matching algorithm:
# - "strict" leftmost substring
# - "loose"  query letters in order, gaps allowed
# - "fuzzy"  substring, else best single-edit window
SEARCH_MODE: str = "strict"
MODES = ("strict", "loose", "fuzzy")

# fold accents away before comparing (café == cafe)
DIACRITICS: bool = False

# wrap matched spans in <HIGHLIGHT_TAG> in MatchResult.text
HIGHLIGHT: bool = False
HIGHLIGHT_TAG: str = "mark"

# loader
ENCODING: str = "utf-8"

# Progress logging (set AUTOCOMPLETE_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("AUTOCOMPLETE_VERBOSE") == "1"
