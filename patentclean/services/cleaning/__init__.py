"""Patent export cleaning: identity resolution, classification and deduplication."""

from .classification import (  # noqa: F401
    DEFAULT_DICTIONARIES,
    NA,
    DocTypeDictionaries,
    classify_doc_type,
    generate_doc_types,
)
from .dedup import SelectiveMode, SimpleMode, remove_dups, resolve_keep, show_dups  # noqa: F401
from .doc_numbers import ParsedDocNumber, build_doc_keys, parse_doc_number  # noqa: F401
from .pipeline import clean_patent_data  # noqa: F401
from .presets import PRESETS, CleaningConfig, SourcePreset, get_preset  # noqa: F401
from .records import PatentRecord, PatentTable  # noqa: F401
