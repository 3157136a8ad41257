"""Source preset endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from patentclean import schemas
from patentclean.services.cleaning.presets import describe_presets

router = APIRouter(prefix="/sources", tags=["sources"])


@router.get("/", response_model=List[schemas.SourcePresetRead])
def list_sources() -> List[schemas.SourcePresetRead]:
    """Return the supported export layouts."""

    return [schemas.SourcePresetRead(**preset) for preset in describe_presets()]
