"""Publication-number parsing and the composite keys derived from it."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

COUNTRY_CODE_PATTERN = re.compile(r"^[A-Z]{0,4}")
# Trailing kind code embedded in the numeric body, e.g. "A1", "B2", "E".
TRAILING_KIND_PATTERN = re.compile(r"[^0-9]*[A-Z][0-9]*$")
KIND_CODE_PATTERN = re.compile(r"[A-Z][0-9]?$")


@dataclass(frozen=True)
class ParsedDocNumber:
    """Structured view of a publication number such as ``US8880270B2``."""

    country_code: str
    pub_num: str
    kind_code: str


@dataclass(frozen=True)
class DocKeys:
    """Lookup keys used to classify a document type."""

    office_doc_length: str
    country_and_kind_code: str


def extract_country_code(doc_num: Optional[str]) -> str:
    """Return the leading run of up to four uppercase letters (US, EP, WO, USRE)."""

    match = COUNTRY_CODE_PATTERN.match(doc_num or "")
    return match.group(0) if match else ""


def extract_pub_number(doc_num: Optional[str]) -> str:
    """Return the numeric publication body with country and kind codes removed.

    WO numbers arrive as ``WO2015/012345A1``; the slash is dropped so the body
    keeps the year prefix (``2015012345``).
    """

    pub_num = (doc_num or "").replace("/", "")
    pub_num = COUNTRY_CODE_PATTERN.sub("", pub_num, count=1)
    return TRAILING_KIND_PATTERN.sub("", pub_num, count=1)


def extract_kind_code(doc_num: Optional[str]) -> str:
    """Return a trailing letter plus an optional digit, or an empty string."""

    match = KIND_CODE_PATTERN.search(doc_num or "")
    return match.group(0) if match else ""


def parse_doc_number(doc_num: Optional[str]) -> ParsedDocNumber:
    return ParsedDocNumber(
        country_code=extract_country_code(doc_num),
        pub_num=extract_pub_number(doc_num),
        kind_code=extract_kind_code(doc_num),
    )


def parse_doc_numbers(doc_nums: Iterable[Optional[str]]) -> List[ParsedDocNumber]:
    return [parse_doc_number(doc_num) for doc_num in doc_nums]


def extract_doc_length(country_code: str, pub_num: str) -> str:
    """Concatenate the office code and the digit count, e.g. ``US11`` or ``EP7``."""

    return f"{country_code}{len(pub_num)}"


def build_doc_keys(parsed: ParsedDocNumber) -> DocKeys:
    return DocKeys(
        office_doc_length=extract_doc_length(parsed.country_code, parsed.pub_num),
        country_and_kind_code=f"{parsed.country_code}{parsed.kind_code}",
    )
