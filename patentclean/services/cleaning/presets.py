"""Source layouts and cleaning configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from patentclean.services.cleaning.classification import DEFAULT_DICTIONARIES, DocTypeDictionaries
from patentclean.services.cleaning.collaborators import ASSIGNEE_STOP_WORDS


# ---------------------------------------------------------------------------
# Source presets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SourcePreset:
    """Column layout and conventions of one export format."""

    name: str
    clean_names: Tuple[str, ...]
    date_fields: Tuple[str, ...]
    date_order: str
    assignee_sep: str
    skip_lines: int

    @property
    def columns_expected(self) -> int:
        return len(self.clean_names)


SUMOBRAIN = SourcePreset(
    name="sumobrain",
    clean_names=(
        "doc_num",
        "doc_type_sumobrain",
        "pub_date",
        "title",
        "abstract",
        "inventors",
        "assignee",
        "app_num",
        "date_filed",
        "class_primary",
        "class_others",
    ),
    date_fields=("pub_date", "date_filed"),
    date_order="ymd",
    assignee_sep=";",
    skip_lines=1,
)

LENS = SourcePreset(
    name="lens",
    clean_names=(
        "result_num",
        "jurisdiction",
        "kind_code_lens",
        "doc_num",
        "lens_id",
        "pub_date",
        "pub_year",
        "app_num",
        "date_filed",
        "priority_apps",
        "priority_date",
        "title",
        "abstract",
        "assignee",
        "inventors",
        "lens_url",
        "doc_type_lens",
        "has_full_text",
        "cited_by_count",
        "family_simple_count",
        "family_extended_count",
        "sequence_count",
        "cpc_classes",
        "ipc_classes",
        "us_classes",
        "patent_citations",
    ),
    date_fields=("pub_date", "date_filed", "priority_date"),
    date_order="mdy",
    assignee_sep=";;",
    skip_lines=0,
)

GOOGLE = SourcePreset(
    name="google",
    clean_names=(
        "doc_num",
        "title",
        "assignee",
        "inventors",
        "priority_date",
        "date_created",
        "pub_date",
        "grant_date",
        "result_link",
    ),
    date_fields=("priority_date", "date_created", "pub_date", "grant_date"),
    date_order="mdy",
    assignee_sep=",",
    skip_lines=1,
)

PRESETS = MappingProxyType({preset.name: preset for preset in (SUMOBRAIN, LENS, GOOGLE)})


def get_preset(name: str) -> SourcePreset:
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown source preset {name!r}; choose one of {sorted(PRESETS)}") from None


# ---------------------------------------------------------------------------
# Cleaning configuration
# ---------------------------------------------------------------------------


DEFAULT_CONFIG = {
    "deduplicate": True,
    "keep_type": "grant",
    "first_assignee_only": True,
    "remove_stop_words": True,
    "stop_words": list(ASSIGNEE_STOP_WORDS),
    "extra_cakc": {},
    "extra_doc_length": {},
}


@dataclass
class CleaningConfig:
    """Per-run options for :func:`clean_patent_data`."""

    deduplicate: bool = True
    keep_type: str = "grant"
    first_assignee_only: bool = True
    remove_stop_words: bool = True
    stop_words: Tuple[str, ...] = ASSIGNEE_STOP_WORDS
    extra_cakc: Dict[str, str] = field(default_factory=dict)
    extra_doc_length: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "CleaningConfig":
        """Load configuration from JSON file or fall back to defaults."""

        if path is None:
            data = DEFAULT_CONFIG
        else:
            with Path(path).expanduser().resolve().open("r", encoding="utf-8") as handle:
                user_config = json.load(handle)
            data = {**DEFAULT_CONFIG, **user_config}
        return cls(
            deduplicate=bool(data.get("deduplicate", True)),
            keep_type=str(data.get("keep_type", DEFAULT_CONFIG["keep_type"])),
            first_assignee_only=bool(data.get("first_assignee_only", True)),
            remove_stop_words=bool(data.get("remove_stop_words", True)),
            stop_words=tuple(dict.fromkeys(data.get("stop_words", DEFAULT_CONFIG["stop_words"]))),
            extra_cakc={str(k): str(v) for k, v in (data.get("extra_cakc") or {}).items()},
            extra_doc_length={str(k): str(v) for k, v in (data.get("extra_doc_length") or {}).items()},
        )

    def dictionaries(self, base: DocTypeDictionaries = DEFAULT_DICTIONARIES) -> DocTypeDictionaries:
        if not (self.extra_cakc or self.extra_doc_length):
            return base
        return base.extend(cakc=self.extra_cakc, doc_length=self.extra_doc_length)


def describe_presets() -> List[Dict[str, object]]:
    return [
        {
            "name": preset.name,
            "columns_expected": preset.columns_expected,
            "clean_names": list(preset.clean_names),
            "date_fields": list(preset.date_fields),
            "date_order": preset.date_order,
            "assignee_sep": preset.assignee_sep,
            "skip_lines": preset.skip_lines,
        }
        for preset in PRESETS.values()
    ]
