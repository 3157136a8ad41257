"""Record cleaning endpoints."""

from __future__ import annotations

import dataclasses
import logging

from fastapi import APIRouter, HTTPException, Query, status

from patentclean import schemas
from patentclean.api.dependencies import AppSettings, CleaningDefaults
from patentclean.services.cleaning import (
    PatentTable,
    build_doc_keys,
    classify_doc_type,
    clean_patent_data,
    get_preset,
    parse_doc_number,
)
from patentclean.services.cleaning.classification import doc_type_label
from patentclean.services.cleaning.collaborators import create_google_url

router = APIRouter(prefix="/records", tags=["records"])

logger = logging.getLogger(__name__)


@router.get("/parse", response_model=schemas.ParsedDocNumberRead)
def parse_record(
    config: CleaningDefaults,
    doc_num: str = Query(..., description="Publication number, e.g. US8880270B2."),
) -> schemas.ParsedDocNumberRead:
    """Parse and classify a single publication number."""

    cleaned = doc_num.replace(" ", "")
    parsed = parse_doc_number(cleaned)
    keys = build_doc_keys(parsed)
    doc_type = classify_doc_type(keys.office_doc_length, keys.country_and_kind_code, config.dictionaries())
    return schemas.ParsedDocNumberRead(
        doc_num=cleaned,
        country_code=parsed.country_code,
        pub_num=parsed.pub_num,
        kind_code=parsed.kind_code,
        office_doc_length=keys.office_doc_length,
        country_and_kind_code=keys.country_and_kind_code,
        doc_type=doc_type_label(doc_type),
        google_url=create_google_url(parsed.country_code, parsed.pub_num, parsed.kind_code),
    )


@router.post("/clean", response_model=schemas.CleanResponse)
def clean_records(
    payload: schemas.CleanRequest,
    settings: AppSettings,
    config: CleaningDefaults,
) -> schemas.CleanResponse:
    """Clean a raw export table posted as columns and rows."""

    source = payload.source or settings.default_source
    try:
        preset = get_preset(source)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc.args[0])) from exc

    overrides = {}
    if payload.deduplicate is not None:
        overrides["deduplicate"] = payload.deduplicate
    if payload.keep_type is not None:
        overrides["keep_type"] = payload.keep_type
    if overrides:
        config = dataclasses.replace(config, **overrides)

    table = PatentTable(columns=list(payload.columns), rows=[list(row) for row in payload.rows])
    records = clean_patent_data(table, preset, config)
    logger.info("Cleaned %s of %s posted rows", len(records), len(table.rows))
    return schemas.CleanResponse(source=preset.name, records=[record.to_row() for record in records])
