"""Duplicate detection and keep/drop decisions for rows sharing an application number."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Hashable, List, Optional, Sequence, Union

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimpleMode:
    """Keep the first occurrence of every key."""


@dataclass(frozen=True)
class SelectiveMode:
    """Within duplicate groups keep only rows whose document type is ``keep_type``.

    A group with no member of ``keep_type`` loses every row. Rows without a
    duplicate partner are always kept. Empty and missing keys are ordinary
    values: all empty strings form one group, all ``None`` keys another.
    """

    has_dup: Sequence[bool]
    doc_types: Sequence[Optional[str]]
    keep_type: str = "grant"


DedupMode = Union[SimpleMode, SelectiveMode]


def show_dups(keys: Sequence[Hashable]) -> List[bool]:
    """Flag every member of a duplicate group, first occurrence included."""

    counts = Counter(keys)
    return [counts[key] > 1 for key in keys]


def keep_first(keys: Sequence[Hashable]) -> List[bool]:
    seen = set()
    keep: List[bool] = []
    for key in keys:
        keep.append(key not in seen)
        seen.add(key)
    return keep


def resolve_keep(keys: Sequence[Hashable], mode: DedupMode) -> List[bool]:
    """Return a mask where ``True`` marks a row to keep."""

    if isinstance(mode, SimpleMode):
        keep = keep_first(keys)
        removed = keep.count(False)
        if removed:
            LOGGER.info("Removing %s duplicates.", removed)
        else:
            LOGGER.info("No duplicates found.")
        return keep

    if isinstance(mode, SelectiveMode):
        if not (len(keys) == len(mode.has_dup) == len(mode.doc_types)):
            raise ValueError(
                "keys, has_dup and doc_types must have the same length "
                f"({len(keys)}, {len(mode.has_dup)}, {len(mode.doc_types)})"
            )
        return [
            not has_dup or doc_type == mode.keep_type
            for has_dup, doc_type in zip(mode.has_dup, mode.doc_types)
        ]

    raise TypeError(f"Unsupported dedup mode: {mode!r}")


def remove_dups(
    keys: Sequence[Hashable],
    has_dup: Optional[Sequence[bool]] = None,
    doc_types: Optional[Sequence[Optional[str]]] = None,
    keep_type: Optional[str] = None,
) -> List[bool]:
    """Infer the dedup mode from which optional arguments are supplied.

    No optional argument selects :class:`SimpleMode`; all three select
    :class:`SelectiveMode`. Any other combination is a caller mistake: it is
    logged and every row is kept.
    """

    supplied = [value is not None for value in (has_dup, doc_types, keep_type)]
    if not any(supplied):
        return resolve_keep(keys, SimpleMode())
    if all(supplied):
        return resolve_keep(
            keys, SelectiveMode(has_dup=has_dup, doc_types=doc_types, keep_type=keep_type)
        )

    LOGGER.warning(
        "Invalid remove_dups arguments: pass only the keys, or has_dup, doc_types and "
        "keep_type together. Keeping all %s rows.",
        len(keys),
    )
    return [True] * len(keys)
