"""
pytest configuration and fixtures.
"""
import sys
from pathlib import Path

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest


@pytest.fixture
def metadata_acquisition_service():
    """Fixture for a service built from the packaged compliance registry."""
    from dataset_compliance.services.metadata_acquisition_service import MetadataAcquisitionService
    return MetadataAcquisitionService()


@pytest.fixture
def small_registry():
    """Fixture for a two entry generic logical type registry."""
    from dataset_compliance.models.data_models import Classification, NonIdLogicalTypeMetadata
    return {
        "NAME": NonIdLogicalTypeMetadata(classification=Classification.CONFIDENTIAL, display_as="Name"),
        "PAYMENT_INFO": NonIdLogicalTypeMetadata(
            classification=Classification.HIGHLY_CONFIDENTIAL, display_as="Payment Info"
        ),
    }
