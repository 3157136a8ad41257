"""Pydantic schemas for the record-cleaning endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

# Cell values must be hashable scalars.
CellValue = Optional[Union[str, int, float, bool]]


class CleanRequest(BaseModel):
    source: Optional[str] = Field(
        None, description="Source preset (sumobrain, lens, google). Defaults to the service setting."
    )
    columns: List[str] = Field(..., description="Column headers exactly as exported by the source.")
    rows: List[List[CellValue]] = Field(default_factory=list, description="Raw rows in column order.")
    deduplicate: Optional[bool] = Field(
        None, description="Drop app/grant pairs sharing an application number."
    )
    keep_type: Optional[str] = Field(
        None, description="Document type kept within a duplicate group (e.g. grant)."
    )


class CleanResponse(BaseModel):
    source: str
    records: List[Dict[str, Any]]


class ParsedDocNumberRead(BaseModel):
    doc_num: str
    country_code: str = Field(..., description="Office prefix such as US, EP, WO or USRE.")
    pub_num: str = Field(..., description="Numeric publication body.")
    kind_code: str = Field(..., description="Kind code suffix (A1, B2, ...) or empty.")
    office_doc_length: str
    country_and_kind_code: str
    doc_type: str = Field(..., description="Classified document type, NA when unknown.")
    google_url: Optional[str] = None


class SourcePresetRead(BaseModel):
    name: str
    columns_expected: int
    clean_names: List[str]
    date_fields: List[str]
    date_order: str
    assignee_sep: str
    skip_lines: int
