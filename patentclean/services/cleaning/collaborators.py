"""Formatting helpers the pipeline calls around the identity/dedup core."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from patentclean.services.cleaning.records import PatentTable

LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Header normalisation
# ---------------------------------------------------------------------------


def clean_header_names(
    table: PatentTable,
    columns_expected: int,
    clean_names: Sequence[str],
) -> PatentTable:
    """Rename columns to the canonical names of a source layout.

    The table comes back unchanged, with a warning, when its width or the
    number of names does not match ``columns_expected``.
    """

    if table.width == columns_expected and len(clean_names) == columns_expected:
        return PatentTable(columns=list(clean_names), rows=table.rows)

    LOGGER.warning(
        "Unexpected data in clean_header_names: table has %s columns, expected %s "
        "with %s clean names. Returning data unchanged.",
        table.width,
        columns_expected,
        len(clean_names),
    )
    return table


# ---------------------------------------------------------------------------
# Google Patents links
# ---------------------------------------------------------------------------


GOOGLE_PATENT_URL = "https://patents.google.com/patent/{doc}"


def create_google_url(country_code: str, pub_num: str, kind_code: str) -> Optional[str]:
    if not pub_num:
        return None
    return GOOGLE_PATENT_URL.format(doc=f"{country_code}{pub_num}{kind_code}")


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


DATE_FORMATS: Dict[str, Tuple[str, ...]] = {
    "ymd": ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d", "%Y%m%d"),
    "mdy": ("%m/%d/%Y", "%m-%d-%Y", "%m.%d.%Y", "%m/%d/%y"),
    "dmy": ("%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y", "%d/%m/%y"),
}


def extract_clean_date(raw: Any, order: str = "ymd") -> Optional[date]:
    """Parse a date written in the given component order.

    ISO strings are accepted for every order so already-cleaned output parses
    again to the same value.
    """

    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        formats = DATE_FORMATS[order]
    except KeyError:
        raise ValueError(f"Unsupported date order {order!r}; expected one of {sorted(DATE_FORMATS)}") from None
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Assignee names
# ---------------------------------------------------------------------------


ASSIGNEE_STOP_WORDS: Tuple[str, ...] = (
    "inc",
    "incorporated",
    "corp",
    "corporation",
    "co",
    "company",
    "ltd",
    "limited",
    "llc",
    "lp",
    "plc",
    "gmbh",
    "ag",
    "kg",
    "sa",
    "nv",
    "bv",
    "ab",
    "spa",
    "kk",
    "kabushiki kaisha",
)

PARENTHESES_PATTERN = re.compile(r"\(.*?\) *")
PUNCTUATION_PATTERN = re.compile(r"[,.']")
WHITESPACE_PATTERN = re.compile(r"\s+")


def build_stop_word_pattern(stop_words: Iterable[str]) -> Optional[re.Pattern[str]]:
    words = sorted({word.strip().lower() for word in stop_words if word and word.strip()}, key=len, reverse=True)
    if not words:
        return None
    return re.compile(r"\b(?:" + "|".join(re.escape(word) for word in words) + r")\b")


def clean_name(
    raw: Optional[str],
    first_assignee_only: bool = True,
    sep: str = ";",
    stop_word_pattern: Optional[re.Pattern[str]] = None,
) -> Optional[str]:
    """Lower-case and strip an assignee name; ``None`` when nothing is left."""

    if raw is None:
        return None
    name = str(raw).lower()
    name = PARENTHESES_PATTERN.sub("", name)
    if first_assignee_only and sep:
        name = name.split(sep, 1)[0]
    name = PUNCTUATION_PATTERN.sub("", name)
    if stop_word_pattern is not None:
        name = stop_word_pattern.sub("", name)
    name = WHITESPACE_PATTERN.sub(" ", name).strip()
    return name or None


def clean_names(
    raw_names: Sequence[Optional[str]],
    first_assignee_only: bool = True,
    sep: str = ";",
    remove_stop_words: bool = True,
    stop_words: Sequence[str] = ASSIGNEE_STOP_WORDS,
) -> List[Optional[str]]:
    pattern = build_stop_word_pattern(stop_words) if remove_stop_words else None
    return [clean_name(raw, first_assignee_only, sep, pattern) for raw in raw_names]
