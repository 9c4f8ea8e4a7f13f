from __future__ import annotations
from typing import Any, Optional

from .models import Trigger


def check_trigger_condition(trigger: Optional[Trigger], query_value: Any, threshold: int) -> bool:
    """
    Decide whether matching should run for this query.

    A trigger condition, when present, is the whole answer and the threshold is
    ignored. Otherwise the query must be at least `threshold` long AND contain
    something besides spaces ("   " never triggers, however long).
    """
    if trigger is not None and trigger.condition is not None:
        return bool(trigger.condition(query_value))
    if not query_value:
        return False
    return len(query_value) >= threshold and len(query_value.replace(" ", "")) > 0
