"""
Compliance type registry.

Static enumerations that drive default field classification and the field
format dropdowns of the compliance metadata form.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

from dataset_compliance.models.data_models import (
    Classification,
    ComplianceFieldIdValue,
    CustomIdLogicalType,
    FieldIdentifierType,
    IdLogicalType,
    NonIdLogicalType,
    NonIdLogicalTypeMetadata,
)

# Identifier logical types, sorted by value
id_logical_types: Tuple[str, ...] = tuple(sorted(t.value for t in IdLogicalType))

custom_id_logical_types: Tuple[str, ...] = tuple(t.value for t in CustomIdLogicalType)

# Default classification and display label for each generic logical type
non_id_field_logical_types: Mapping[str, NonIdLogicalTypeMetadata] = MappingProxyType({
    NonIdLogicalType.NAME.value: NonIdLogicalTypeMetadata(
        classification=Classification.CONFIDENTIAL, display_as="Name"
    ),
    NonIdLogicalType.EMAIL.value: NonIdLogicalTypeMetadata(
        classification=Classification.CONFIDENTIAL, display_as="E-mail"
    ),
    NonIdLogicalType.PHONE.value: NonIdLogicalTypeMetadata(
        classification=Classification.CONFIDENTIAL, display_as="Phone Number"
    ),
    NonIdLogicalType.ADDRESS.value: NonIdLogicalTypeMetadata(
        classification=Classification.CONFIDENTIAL, display_as="Address"
    ),
    NonIdLogicalType.LATITUDE_LONGITUDE.value: NonIdLogicalTypeMetadata(
        classification=Classification.CONFIDENTIAL, display_as="Latitude and Longitude"
    ),
    NonIdLogicalType.CITY_STATE_REGION.value: NonIdLogicalTypeMetadata(
        classification=Classification.LIMITED_DISTRIBUTION, display_as="City, State, Region"
    ),
    NonIdLogicalType.IP_ADDRESS.value: NonIdLogicalTypeMetadata(
        classification=Classification.CONFIDENTIAL, display_as="IP Address"
    ),
    NonIdLogicalType.FINANCIAL_NUMBER.value: NonIdLogicalTypeMetadata(
        classification=Classification.CONFIDENTIAL, display_as="Financial Number"
    ),
    NonIdLogicalType.PAYMENT_INFO.value: NonIdLogicalTypeMetadata(
        classification=Classification.HIGHLY_CONFIDENTIAL, display_as="Payment Info"
    ),
    NonIdLogicalType.PASSWORD_CREDENTIAL.value: NonIdLogicalTypeMetadata(
        classification=Classification.HIGHLY_CONFIDENTIAL, display_as="Password and Credentials"
    ),
    NonIdLogicalType.AUTHENTICATION_TOKEN.value: NonIdLogicalTypeMetadata(
        classification=Classification.HIGHLY_CONFIDENTIAL, display_as="Authentication Token"
    ),
    NonIdLogicalType.MESSAGE.value: NonIdLogicalTypeMetadata(
        classification=Classification.HIGHLY_CONFIDENTIAL, display_as="Message"
    ),
    NonIdLogicalType.NATIONAL_ID.value: NonIdLogicalTypeMetadata(
        classification=Classification.HIGHLY_CONFIDENTIAL, display_as="National Id"
    ),
    NonIdLogicalType.SOCIAL_SECURITY_NUMBER.value: NonIdLogicalTypeMetadata(
        classification=Classification.HIGHLY_CONFIDENTIAL, display_as="Social Security Number"
    ),
    NonIdLogicalType.EMAIL_CONTENT.value: NonIdLogicalTypeMetadata(
        classification=Classification.HIGHLY_CONFIDENTIAL, display_as="Email Content"
    ),
})

# Generic logical types, sorted by value
generic_logical_types: Tuple[str, ...] = tuple(sorted(t.value for t in NonIdLogicalType))

# Identifier categories a field may be tagged with
field_identifier_types: Mapping[str, FieldIdentifierType] = MappingProxyType({
    "none": FieldIdentifierType(value=ComplianceFieldIdValue.NONE, is_id=False, display_as="Not an ID"),
    "member": FieldIdentifierType(value=ComplianceFieldIdValue.MEMBER, is_id=True, display_as="Member ID"),
    "group": FieldIdentifierType(value=ComplianceFieldIdValue.GROUP, is_id=True, display_as="Group ID"),
    "organization": FieldIdentifierType(
        value=ComplianceFieldIdValue.ORGANIZATION, is_id=True, display_as="Organization ID"
    ),
    "generic": FieldIdentifierType(value=ComplianceFieldIdValue.GENERIC, is_id=True, display_as="Mixed ID"),
    "custom": FieldIdentifierType(value=ComplianceFieldIdValue.CUSTOM, is_id=True, display_as="Custom ID"),
})

field_identifier_type_values: Tuple[str, ...] = tuple(v.value for v in ComplianceFieldIdValue)
