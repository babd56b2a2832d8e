"""
Application configuration settings.

Values are read from the process environment when the settings object is
created. Keyword arguments passed to Settings take precedence over the
environment.
"""
import os

from pydantic import BaseModel

from dataset_compliance.config import constants


class Settings(BaseModel):
    # Application settings
    APP_NAME: str = "Dataset Compliance Metadata"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Compliance suggestion thresholds (can be overridden via environment)
    LAST_SEEN_SUGGESTION_INTERVAL_DAYS: int = constants.LAST_SEEN_SUGGESTION_INTERVAL_DAYS
    LOW_QUALITY_SUGGESTION_CONFIDENCE_THRESHOLD: float = constants.LOW_QUALITY_SUGGESTION_CONFIDENCE_THRESHOLD

    def __init__(self, **data):
        # Manual environment variable loading in place of pydantic-settings
        env_values = {}
        for f in type(self).model_fields.keys():
            val = os.environ.get(f)
            if val is not None:
                env_values[f] = val

        # Merge env values with passed data (data takes precedence)
        super().__init__(**{**env_values, **data})


# Create settings instance
settings = Settings()
