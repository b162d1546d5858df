"""Flattening of error trees into path-addressed violations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from structval.models.errors import ErrorKind, ErrorTree, SchemaError, Violation

if TYPE_CHECKING:
    from structval.loader import SourceMap


def iter_violations(
    tree: ErrorTree,
    *,
    source_map: SourceMap | None = None,
    include_aggregates: bool = False,
) -> Iterator[Violation]:
    """Walk ``tree`` depth first, yielding one ``Violation`` per error.

    Top-level keys start each path (``$``). Properties under an
    ``OBJECT_ERROR`` append ``.name`` and elements under an ``ARRAY_ERROR``
    append ``[i]``, e.g. ``$.users[1].name``.

    Aggregate entries are skipped unless ``include_aggregates`` is set; their
    children are always visited.  With a ``source_map`` each violation gets
    the span of its path relative to the document root.
    """
    for key, entries in tree.items():
        yield from _walk(key, "", entries, source_map, include_aggregates)


def _walk(
    path: str,
    relative: str,
    entries: list[SchemaError],
    source_map: SourceMap | None,
    include_aggregates: bool,
) -> Iterator[Violation]:
    for entry in entries:
        if not entry.type.is_aggregate or include_aggregates:
            span = source_map.get(relative) if source_map is not None and relative else None
            yield Violation(path=path, type=entry.type, message=entry.message, span=span)
        if not entry.errors:
            continue
        for child_key, child_entries in entry.errors.items():
            if entry.type is ErrorKind.ARRAY_ERROR:
                segment = f"[{child_key}]"
                child_relative = f"{relative}{segment}"
            else:
                segment = f".{child_key}"
                child_relative = f"{relative}.{child_key}" if relative else child_key
            yield from _walk(
                f"{path}{segment}", child_relative, child_entries, source_map, include_aggregates
            )


def flatten(
    tree: ErrorTree,
    *,
    source_map: SourceMap | None = None,
    include_aggregates: bool = False,
) -> list[Violation]:
    return list(
        iter_violations(tree, source_map=source_map, include_aggregates=include_aggregates)
    )


def count_errors(tree: ErrorTree) -> int:
    """Number of leaf (non-aggregate) errors anywhere in ``tree``."""
    return sum(1 for _ in iter_violations(tree))


def has_errors(tree: ErrorTree | None) -> bool:
    return bool(tree)
