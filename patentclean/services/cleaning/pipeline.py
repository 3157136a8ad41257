"""Turn a raw source export into deduplicated, classified patent records."""

from __future__ import annotations

import logging
from typing import List, Optional

from patentclean.services.cleaning.classification import DocTypeDictionaries, generate_doc_types
from patentclean.services.cleaning.collaborators import (
    build_stop_word_pattern,
    clean_header_names,
    clean_name,
    create_google_url,
    extract_clean_date,
)
from patentclean.services.cleaning.dedup import SelectiveMode, resolve_keep, show_dups
from patentclean.services.cleaning.doc_numbers import build_doc_keys, parse_doc_number
from patentclean.services.cleaning.presets import CleaningConfig, SourcePreset
from patentclean.services.cleaning.records import PatentRecord, PatentTable

LOGGER = logging.getLogger(__name__)


def clean_patent_data(
    table: PatentTable,
    preset: SourcePreset,
    config: Optional[CleaningConfig] = None,
    dictionaries: Optional[DocTypeDictionaries] = None,
) -> List[PatentRecord]:
    """Run header normalisation, parsing, classification, dedup, URLs, dates and names.

    Stages whose input column is missing are skipped, so a Google export (no
    application number) is still parsed, classified and cleaned.
    """

    config = config or CleaningConfig()
    dictionaries = dictionaries or config.dictionaries()

    table = clean_header_names(table, preset.columns_expected, preset.clean_names)
    records = [PatentRecord.from_source(values) for values in table.to_dicts()]

    if table.has_column("doc_num"):
        records = resolve_document_identity(records, dictionaries, config)

    date_fields = preset.date_fields
    if date_fields and all(table.has_column(name) for name in date_fields):
        for record in records:
            for name in date_fields:
                record.fields[name] = extract_clean_date(record.fields.get(name), preset.date_order)

    if table.has_column("assignee"):
        pattern = build_stop_word_pattern(config.stop_words) if config.remove_stop_words else None
        for record in records:
            record.assignee_clean = clean_name(
                record.fields.get("assignee"),
                first_assignee_only=config.first_assignee_only,
                sep=preset.assignee_sep,
                stop_word_pattern=pattern,
            )

    LOGGER.info("Cleaned %s %s records", len(records), preset.name)
    return records


def resolve_document_identity(
    records: List[PatentRecord],
    dictionaries: DocTypeDictionaries,
    config: CleaningConfig,
) -> List[PatentRecord]:
    for record in records:
        doc_num = record.doc_num
        if doc_num is not None:
            doc_num = str(doc_num).replace(" ", "")
            record.fields["doc_num"] = doc_num
        parsed = parse_doc_number(doc_num)
        keys = build_doc_keys(parsed)
        record.country_code = parsed.country_code
        record.pub_num = parsed.pub_num
        record.kind_code = parsed.kind_code
        record.office_doc_length = keys.office_doc_length
        record.country_and_kind_code = keys.country_and_kind_code

    doc_types = generate_doc_types(
        [record.office_doc_length for record in records],
        [record.country_and_kind_code for record in records],
        dictionaries,
    )
    for record, doc_type in zip(records, doc_types):
        record.doc_type = doc_type

    # Google exports carry no application number and skip this step. Blank
    # application numbers form one shared group.
    if config.deduplicate and records and "app_num" in records[0].fields:
        app_nums = [record.fields.get("app_num") for record in records]
        has_dup = show_dups(app_nums)
        for record, flag in zip(records, has_dup):
            record.has_dup = flag
        keep = resolve_keep(
            app_nums,
            SelectiveMode(has_dup=has_dup, doc_types=doc_types, keep_type=config.keep_type),
        )
        removed = keep.count(False)
        if removed:
            LOGGER.info("Removing %s duplicated (grant, app, etc. matching pairs) rows.", removed)
        records = [record for record, kept in zip(records, keep) if kept]

    for record in records:
        record.google_url = create_google_url(record.country_code, record.pub_num, record.kind_code)
    return records
