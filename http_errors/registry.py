from __future__ import annotations

from typing import List, Optional

from . import data
from .models import StatusEntry


def lookup(code: int) -> Optional[StatusEntry]:
    return data.statuses[code] if is_known(code) else None


def is_known(code: int) -> bool:
    try:
        return code in data.statuses
    except TypeError:
        # unhashable
        return False


def reason_phrase(code: int) -> Optional[str]:
    entry = lookup(code)
    return entry.phrase if entry else None


def short_name(code: int) -> Optional[str]:
    entry = lookup(code)
    return entry.name if entry else None


def error_codes() -> List[int]:
    """All registered codes a :class:`HttpError` may carry, ascending."""
    return sorted(code for code, entry in data.statuses.items() if entry.is_error)
