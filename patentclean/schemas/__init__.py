"""Schema exports."""

from patentclean.schemas.record import (
	CleanRequest,
	CleanResponse,
	ParsedDocNumberRead,
	SourcePresetRead,
)

__all__ = [
	"CleanRequest",
	"CleanResponse",
	"ParsedDocNumberRead",
	"SourcePresetRead",
]
