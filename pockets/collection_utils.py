"""In-place helpers for filtering and querying lists and mappings."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, MutableMapping, MutableSequence


def map_erase_if(mapping: MutableMapping, predicate: Callable[[Any], bool]) -> None:
    """Remove every entry whose value satisfies ``predicate``."""
    for key in [k for k, v in mapping.items() if predicate(v)]:
        del mapping[key]


def map_keys(mapping: MutableMapping) -> List:
    """All keys of ``mapping`` in ascending order."""
    return sorted(mapping)


def vector_erase_if(items: MutableSequence, predicate: Callable[[Any], bool]) -> None:
    """Remove every element satisfying ``predicate``, keeping the order of the rest."""
    items[:] = [item for item in items if not predicate(item)]


def vector_remove(items: MutableSequence, element: Any) -> None:
    """Remove all elements equal to ``element``."""
    items[:] = [item for item in items if not item == element]


def vector_contains(items: Iterable, element: Any) -> bool:
    """True if some element equals ``element``."""
    return any(item == element for item in items)


def vector_contains_if(items: Iterable, predicate: Callable[[Any], bool]) -> bool:
    """True if ``predicate`` holds for some element."""
    return any(predicate(item) for item in items)