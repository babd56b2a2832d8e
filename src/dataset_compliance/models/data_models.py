"""
Data models for dataset compliance metadata.
"""
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


# Compliance enumerations
class Classification(str, Enum):
    """Security classification applied to a dataset field."""
    CONFIDENTIAL = "confidential"
    LIMITED_DISTRIBUTION = "limitedDistribution"
    HIGHLY_CONFIDENTIAL = "highlyConfidential"


class IdLogicalType(str, Enum):
    """Field formats available to identifier fields."""
    NUMERIC = "NUMERIC"
    URN = "URN"
    REVERSED_URN = "REVERSED_URN"
    COMPOSITE_URN = "COMPOSITE_URN"


class CustomIdLogicalType(str, Enum):
    """Field formats available to custom identifier fields."""
    CUSTOM = "CUSTOM"


class NonIdLogicalType(str, Enum):
    """Generic (non identifier) field formats."""
    NAME = "NAME"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    ADDRESS = "ADDRESS"
    LATITUDE_LONGITUDE = "LATITUDE_LONGITUDE"
    CITY_STATE_REGION = "CITY_STATE_REGION"
    IP_ADDRESS = "IP_ADDRESS"
    FINANCIAL_NUMBER = "FINANCIAL_NUMBER"
    PAYMENT_INFO = "PAYMENT_INFO"
    PASSWORD_CREDENTIAL = "PASSWORD_CREDENTIAL"
    AUTHENTICATION_TOKEN = "AUTHENTICATION_TOKEN"
    MESSAGE = "MESSAGE"
    NATIONAL_ID = "NATIONAL_ID"
    SOCIAL_SECURITY_NUMBER = "SOCIAL_SECURITY_NUMBER"
    EMAIL_CONTENT = "EMAIL_CONTENT"


class ComplianceFieldIdValue(str, Enum):
    """Identifier type values a field can be tagged with."""
    NONE = "none"
    MEMBER = "member"
    GROUP = "group"
    ORGANIZATION = "organization"
    GENERIC = "generic"
    CUSTOM = "custom"


# Registry models
class NonIdLogicalTypeMetadata(BaseModel):
    """Default classification and display name for a generic logical type."""
    model_config = ConfigDict(frozen=True)

    classification: Classification
    display_as: str


class FieldIdentifierType(BaseModel):
    """Identifier category entry."""
    model_config = ConfigDict(frozen=True)

    value: ComplianceFieldIdValue
    is_id: bool
    display_as: str


# Dropdown option models
class SecurityClassificationOption(BaseModel):
    """Security classification dropdown option; an empty value means no selection."""
    model_config = ConfigDict(frozen=True)

    value: Union[Literal[""], Classification]
    label: str


class FieldFormatDropdownOption(BaseModel):
    """Field format (logical type) dropdown option."""
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
