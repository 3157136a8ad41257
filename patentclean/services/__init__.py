"""Service exports."""

from patentclean.services.cleaning import CleaningConfig, PatentRecord, PatentTable, clean_patent_data

__all__ = [
	"CleaningConfig",
	"PatentRecord",
	"PatentTable",
	"clean_patent_data",
]
