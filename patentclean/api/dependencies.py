"""Shared API dependencies for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from patentclean.core.config import Settings, get_settings
from patentclean.services.cleaning import CleaningConfig


def get_cleaning_config(settings: Settings = Depends(get_settings)) -> CleaningConfig:
    """Load cleaning defaults, honouring an optional JSON override file."""

    return CleaningConfig.load(settings.cleaning_config_path)


AppSettings = Annotated[Settings, Depends(get_settings)]
CleaningDefaults = Annotated[CleaningConfig, Depends(get_cleaning_config)]
