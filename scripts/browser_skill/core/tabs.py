# scripts/browser_skill/core/tabs.py
import sys
from typing import Any, Sequence
from .errors import NoPagesAvailableError, TabIndexOutOfRangeError, TypeMismatchError
from ..actions.schema import TAB_INDEX


def coerce_tab_index(value: Any) -> int:
    """tabIndex from the CLI; absent means the first tab"""
    if value is None:
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError):
        raise TypeMismatchError(TAB_INDEX, "number", value) from None


def resolve_tab(pages: Sequence[Any], index: int, strict: bool = False):
    """Pick a page by zero-based index, falling back to the first one"""
    if not pages:
        raise NoPagesAvailableError()

    if 0 <= index < len(pages):
        return pages[index]

    if strict:
        raise TabIndexOutOfRangeError(index, len(pages))

    print(f"Tab index {index} out of bounds, using tab 0.", file=sys.stderr)
    return pages[0]
