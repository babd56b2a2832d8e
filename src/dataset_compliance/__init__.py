"""
Dataset compliance metadata: schema descriptors and the lookup tables behind
the compliance metadata form.
"""
from dataset_compliance.utils.logger import logger
from dataset_compliance.models.schema_models import SchemaDefinition
from dataset_compliance.services.metadata_acquisition_service import (
    MetadataAcquisitionService,
    get_default_logical_type,
    get_metadata_acquisition_service,
    has_predefined_field_format,
    is_custom_id,
    is_mixed_id,
    logical_type_value_label,
)

__version__ = "0.1.0"

__all__ = [
    "logger",
    "SchemaDefinition",
    "MetadataAcquisitionService",
    "get_default_logical_type",
    "get_metadata_acquisition_service",
    "has_predefined_field_format",
    "is_custom_id",
    "is_mixed_id",
    "logical_type_value_label",
]
