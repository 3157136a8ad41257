"""Document-type classification from kind-code and number-length dictionaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence

LOGGER = logging.getLogger(__name__)

NA = "NA"


# ---------------------------------------------------------------------------
# Dictionaries
# ---------------------------------------------------------------------------


DEFAULT_CAKC = {
    # United States
    "USA": "app",
    "USA1": "app",
    "USA2": "app",
    "USA9": "app",
    "USB1": "grant",
    "USB2": "grant",
    "USC": "grant",
    "USREE": "reissue",
    "USDS": "design",
    "USPPP2": "plant",
    "USPPP3": "plant",
    "USH": "statutory invention registration",
    # European Patent Office
    "EPA1": "app",
    "EPA2": "app",
    "EPA3": "search report",
    "EPA4": "search report",
    "EPA8": "app",
    "EPA9": "app",
    "EPB1": "grant",
    "EPB2": "grant",
    "EPB8": "grant",
    "EPB9": "grant",
    # PCT
    "WOA1": "app",
    "WOA2": "app",
    "WOA3": "search report",
    "WOA4": "app",
    "WOA8": "app",
    "WOA9": "app",
    # Japan
    "JPA": "app",
    "JPB1": "grant",
    "JPB2": "grant",
    "JPU": "utility model",
    "JPY2": "utility model",
    # China
    "CNA": "app",
    "CNB": "grant",
    "CNC": "grant",
    "CNU": "utility model",
    "CNY": "utility model",
    "CNS": "design",
    # Korea
    "KRA": "app",
    "KRB1": "grant",
    "KRU": "utility model",
    # Germany
    "DEA1": "app",
    "DEB3": "grant",
    "DEB4": "grant",
    "DEC5": "grant",
    "DET5": "app",
    "DEU1": "utility model",
    # United Kingdom
    "GBA": "app",
    "GBB": "grant",
    # Canada
    "CAA1": "app",
    "CAC": "grant",
    # Australia
    "AUA1": "app",
    "AUA4": "app",
    "AUB2": "grant",
    "AUB4": "grant",
    # France
    "FRA1": "app",
    "FRB1": "grant",
    # Taiwan
    "TWA": "app",
    "TWB": "grant",
    "TWU": "utility model",
}

DEFAULT_DOC_LENGTH = {
    "US11": "app",
    "US6": "grant",
    "US7": "grant",
    "US8": "grant",
    "USD6": "design",
    "USD7": "design",
    "USRE5": "reissue",
    "USPP5": "plant",
    "WO10": "app",
    "WO11": "app",
    "JP10": "app",
    "CN9": "app",
    "KR13": "app",
    "DE15": "app",
    "GB7": "app",
}


@dataclass(frozen=True)
class DocTypeDictionaries:
    """Read-only lookup tables keyed by country+kind code and by country+length."""

    cakc: Mapping[str, str] = field(default_factory=dict)
    doc_length: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cakc", MappingProxyType(dict(self.cakc)))
        object.__setattr__(self, "doc_length", MappingProxyType(dict(self.doc_length)))

    def extend(
        self,
        cakc: Optional[Mapping[str, str]] = None,
        doc_length: Optional[Mapping[str, str]] = None,
    ) -> "DocTypeDictionaries":
        """Return a new instance with extra (or overriding) entries."""

        return DocTypeDictionaries(
            cakc={**self.cakc, **(cakc or {})},
            doc_length={**self.doc_length, **(doc_length or {})},
        )


DEFAULT_DICTIONARIES = DocTypeDictionaries(cakc=DEFAULT_CAKC, doc_length=DEFAULT_DOC_LENGTH)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify_doc_type(
    office_doc_length: str,
    country_and_kind_code: str,
    dictionaries: DocTypeDictionaries = DEFAULT_DICTIONARIES,
) -> Optional[str]:
    """Resolve one document type; ``None`` means neither dictionary matched.

    The kind-code dictionary always wins over the length heuristic.
    """

    doc_type = dictionaries.cakc.get(country_and_kind_code)
    if doc_type is not None:
        return doc_type
    return dictionaries.doc_length.get(office_doc_length)


def generate_doc_types(
    office_doc_lengths: Sequence[str],
    country_and_kind_codes: Sequence[str],
    dictionaries: DocTypeDictionaries = DEFAULT_DICTIONARIES,
) -> List[Optional[str]]:
    if len(office_doc_lengths) != len(country_and_kind_codes):
        raise ValueError(
            "office_doc_lengths and country_and_kind_codes must have the same length "
            f"({len(office_doc_lengths)} != {len(country_and_kind_codes)})"
        )

    doc_types = [
        classify_doc_type(doc_length, cakc, dictionaries)
        for doc_length, cakc in zip(office_doc_lengths, country_and_kind_codes)
    ]

    found = sum(1 for doc_type in doc_types if doc_type is not None)
    if found < len(doc_types):
        LOGGER.warning(
            "Not all document types were found: %s rows will be %s. "
            "Extend the kind-code dictionary to classify them.",
            len(doc_types) - found,
            NA,
        )
    return doc_types


def doc_type_label(doc_type: Optional[str]) -> str:
    """Serialise a classifier result, substituting the ``NA`` sentinel."""

    return NA if doc_type is None else doc_type
