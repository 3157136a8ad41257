"""Table and record containers passed between cleaning stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from patentclean.services.cleaning.classification import NA

DERIVED_FIELDS = (
    "country_code",
    "pub_num",
    "kind_code",
    "office_doc_length",
    "country_and_kind_code",
    "doc_type",
    "has_dup",
    "google_url",
    "assignee_clean",
)


@dataclass
class PatentTable:
    """Raw import rows with their column names, as read from a source export."""

    columns: List[str]
    rows: List[List[Any]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.columns)

    def has_column(self, name: str) -> bool:
        return name in self.columns

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [dict(zip(self.columns, row)) for row in self.rows]


@dataclass
class PatentRecord:
    """One cleaned row: source values plus fields derived from ``doc_num``."""

    fields: Dict[str, Any]
    country_code: str = ""
    pub_num: str = ""
    kind_code: str = ""
    office_doc_length: str = ""
    country_and_kind_code: str = ""
    doc_type: Optional[str] = None
    has_dup: Optional[bool] = None
    google_url: Optional[str] = None
    assignee_clean: Optional[str] = None

    @classmethod
    def from_source(cls, values: Dict[str, Any]) -> "PatentRecord":
        # derived values in the input are recomputed, never trusted
        return cls(fields={key: value for key, value in values.items() if key not in DERIVED_FIELDS})

    @property
    def doc_num(self) -> Optional[str]:
        return self.fields.get("doc_num")

    def to_row(self) -> Dict[str, Any]:
        """Flatten to a JSON-friendly dict; unresolved labels become ``"NA"``."""

        row: Dict[str, Any] = {}
        for key, value in self.fields.items():
            row[key] = value.isoformat() if isinstance(value, date) else value
        if "doc_num" in self.fields:
            row.update(
                country_code=self.country_code,
                pub_num=self.pub_num,
                kind_code=self.kind_code,
                office_doc_length=self.office_doc_length,
                country_and_kind_code=self.country_and_kind_code,
                doc_type=NA if self.doc_type is None else self.doc_type,
                google_url=self.google_url,
            )
            if self.has_dup is not None:
                row["has_dup"] = self.has_dup
        if "assignee" in self.fields:
            row["assignee_clean"] = NA if self.assignee_clean is None else self.assignee_clean
        return row
