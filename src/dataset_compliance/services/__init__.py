"""
Services layer for dataset compliance metadata.
"""
from .metadata_acquisition_service import (
    MetadataAcquisitionService,
    get_metadata_acquisition_service,
)

__all__ = [
    "MetadataAcquisitionService",
    "get_metadata_acquisition_service",
]
