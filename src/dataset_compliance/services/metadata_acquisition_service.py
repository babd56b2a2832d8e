"""
Metadata Acquisition Service
- Default security classification for every field logical type
- Security classification and field format dropdown options for the compliance form
- Identifier type checks deciding whether a field format is editable
- Compliance suggestion quality / freshness checks

Lookup tables are built once and are read-only afterwards.
"""
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple
import logging

from dataset_compliance.config import compliance
from dataset_compliance.config.constants import (
    EMPTY_SELECTION_LABEL,
    LOGICAL_TYPE_CATEGORIES,
    MIXED_ID_DEFAULT_LOGICAL_TYPE,
)
from dataset_compliance.config.settings import settings
from dataset_compliance.models.data_models import (
    Classification,
    FieldFormatDropdownOption,
    NonIdLogicalTypeMetadata,
    SecurityClassificationOption,
)
from dataset_compliance.utils.exceptions import ConfigurationError, ValidationError
from dataset_compliance.utils.formatters import (
    format_as_capitalized_string_with_spaces,
    format_id_logical_type_label,
)
from dataset_compliance.utils.validators import validate_logical_type, validate_suggestion_confidence

logger = logging.getLogger(__name__)


# Classification table builders
def build_id_field_classification(
    custom_id_logical_types: Iterable[str],
    id_logical_types: Iterable[str],
) -> Mapping[str, Classification]:
    """Map every custom and standard id logical type to the limited distribution classification."""
    classification = {}
    for id_logical_type in [*custom_id_logical_types, *id_logical_types]:
        classification[id_logical_type] = Classification.LIMITED_DISTRIBUTION
    return MappingProxyType(classification)


def build_non_id_field_classification(
    generic_logical_types: Iterable[str],
    registry: Mapping[str, NonIdLogicalTypeMetadata],
) -> Mapping[str, Classification]:
    """
    Map every generic logical type to the classification declared in the registry.

    Raises:
        ConfigurationError: if a logical type has no registry entry
    """
    classification = {}
    for logical_type in generic_logical_types:
        metadata = registry.get(logical_type)
        if metadata is None:
            raise ConfigurationError(f"Generic logical type {logical_type} has no registry entry")
        classification[logical_type] = metadata.classification
    return MappingProxyType(classification)


def merge_field_classifications(
    id_classification: Mapping[str, Classification],
    non_id_classification: Mapping[str, Classification],
) -> Mapping[str, Classification]:
    """
    Merge id and non id field classifications by key union.

    Raises:
        ConfigurationError: if a logical type appears in both maps
    """
    overlap = set(id_classification) & set(non_id_classification)
    if overlap:
        raise ConfigurationError(
            f"Logical types classified as both id and non id: {', '.join(sorted(overlap))}"
        )
    return MappingProxyType({**id_classification, **non_id_classification})


def unique_classifiers(classification: Mapping[str, Classification]) -> Tuple[Classification, ...]:
    """Distinct classification values, in order of first occurrence."""
    return tuple(dict.fromkeys(classification.values()))


def build_security_classification_options(
    classifiers: Iterable[Classification],
) -> Tuple[SecurityClassificationOption, ...]:
    """
    Build the security classification dropdown options.

    The first option is the empty selection, followed by each classifier sorted
    by value and labelled from its camelCase value.
    """
    options: List[SecurityClassificationOption] = [
        SecurityClassificationOption(value="", label=EMPTY_SELECTION_LABEL)
    ]
    for classifier in sorted(classifiers, key=lambda c: c.value):
        options.append(
            SecurityClassificationOption(
                value=classifier,
                label=format_as_capitalized_string_with_spaces(classifier.value),
            )
        )
    return tuple(options)


# Identifier type checks
def is_mixed_id(identifier_type: str) -> bool:
    """Checks if the identifier type is a mixed (generic) id."""
    return identifier_type == compliance.field_identifier_types["generic"].value


def is_custom_id(identifier_type: str) -> bool:
    """Checks if the identifier type is a custom id."""
    return identifier_type == compliance.field_identifier_types["custom"].value


def has_predefined_field_format(identifier_type: str) -> bool:
    """
    Checks if an identifier type has a predefined / immutable field format, i.e.
    the field format should not be changed by the end user.
    """
    return is_mixed_id(identifier_type) or is_custom_id(identifier_type)


def get_default_logical_type(identifier_type: str) -> Optional[str]:
    """Gets the default logical type for an identifier type, None when there is no default."""
    if is_mixed_id(identifier_type):
        return MIXED_ID_DEFAULT_LOGICAL_TYPE
    return None


# Field format options
def logical_type_value_label(
    category: str,
    *,
    id_logical_types: Optional[Iterable[str]] = None,
    generic_logical_types: Optional[Iterable[str]] = None,
    registry: Optional[Mapping[str, NonIdLogicalTypeMetadata]] = None,
) -> Tuple[FieldFormatDropdownOption, ...]:
    """
    Build value / label pairs for the logical types of a category.

    Args:
        category: "id" for identifier logical types, "generic" for non id logical types
        id_logical_types: Identifier logical types (defaults to the compliance registry)
        generic_logical_types: Generic logical types (defaults to the compliance registry)
        registry: Generic logical type metadata supplying display labels

    Returns:
        Dropdown options in source order

    Raises:
        ValueError: if the category is not "id" or "generic"
        ConfigurationError: if a generic logical type has no registry entry
    """
    if category not in LOGICAL_TYPE_CATEGORIES:
        raise ValueError(f"Unknown logical type category: {category!r}")

    if category == "generic":
        registry = compliance.non_id_field_logical_types if registry is None else registry
        values = compliance.generic_logical_types if generic_logical_types is None else generic_logical_types
        options = []
        for value in values:
            metadata = registry.get(value)
            if metadata is None:
                raise ConfigurationError(f"Generic logical type {value} has no registry entry")
            options.append(FieldFormatDropdownOption(value=value, label=metadata.display_as))
        return tuple(options)

    values = compliance.id_logical_types if id_logical_types is None else id_logical_types
    return tuple(
        FieldFormatDropdownOption(value=value, label=format_id_logical_type_label(value))
        for value in values
    )


# Compliance suggestions
def is_low_quality_suggestion(confidence: float, threshold: Optional[float] = None) -> bool:
    """
    Checks if a compliance suggestion's confidence falls below the quality threshold.

    Raises:
        ValidationError: if confidence is not a number between 0 and 1
    """
    if not validate_suggestion_confidence(confidence):
        raise ValidationError(f"Suggestion confidence must be between 0 and 1, got {confidence!r}")
    if threshold is None:
        threshold = settings.LOW_QUALITY_SUGGESTION_CONFIDENCE_THRESHOLD
    return confidence < threshold


def is_suggestion_seen(
    suggestion_modified: datetime,
    policy_modified: datetime,
    interval: Optional[timedelta] = None,
) -> bool:
    """
    Checks if a compliance suggestion has already been seen by the policy owner.

    A suggestion is seen when it was last modified no later than the interval
    after the policy's last modification.
    """
    if interval is None:
        interval = timedelta(days=settings.LAST_SEEN_SUGGESTION_INTERVAL_DAYS)
    return suggestion_modified - policy_modified <= interval


class MetadataAcquisitionService:
    """
    Holds the compliance lookup tables, built once from the compliance registry.

    Tables are exposed as read-only properties; the mappings and option tuples
    themselves are immutable.
    """

    def __init__(
        self,
        id_logical_types: Iterable[str] = compliance.id_logical_types,
        custom_id_logical_types: Iterable[str] = compliance.custom_id_logical_types,
        generic_logical_types: Iterable[str] = compliance.generic_logical_types,
        registry: Mapping[str, NonIdLogicalTypeMetadata] = compliance.non_id_field_logical_types,
    ) -> None:
        id_logical_types = tuple(id_logical_types)
        custom_id_logical_types = tuple(custom_id_logical_types)
        generic_logical_types = tuple(generic_logical_types)

        # Every classified key must be a member of the logical type enumerations
        unknown = [
            t for t in (*custom_id_logical_types, *id_logical_types, *generic_logical_types)
            if not validate_logical_type(t)
        ]
        if unknown:
            raise ConfigurationError(f"Unknown logical types: {', '.join(unknown)}")

        self._id_field_data_type_classification = build_id_field_classification(
            custom_id_logical_types, id_logical_types
        )
        self._non_id_field_data_type_classification = build_non_id_field_classification(
            generic_logical_types, registry
        )
        self._default_field_data_type_classification = merge_field_classifications(
            self._id_field_data_type_classification,
            self._non_id_field_data_type_classification,
        )
        self._classifiers = unique_classifiers(self._default_field_data_type_classification)
        self._security_classification_dropdown_options = build_security_classification_options(
            self._classifiers
        )
        self._logical_types_for_ids = logical_type_value_label("id", id_logical_types=id_logical_types)
        self._logical_types_for_generic = logical_type_value_label(
            "generic", generic_logical_types=generic_logical_types, registry=registry
        )

        logger.debug(
            f"Built {len(self._default_field_data_type_classification)} default field classifications "
            f"across {len(self._classifiers)} classifiers"
        )

    @property
    def id_field_data_type_classification(self) -> Mapping[str, Classification]:
        return self._id_field_data_type_classification

    @property
    def non_id_field_data_type_classification(self) -> Mapping[str, Classification]:
        return self._non_id_field_data_type_classification

    @property
    def default_field_data_type_classification(self) -> Mapping[str, Classification]:
        return self._default_field_data_type_classification

    @property
    def classifiers(self) -> Tuple[Classification, ...]:
        return self._classifiers

    @property
    def security_classification_dropdown_options(self) -> Tuple[SecurityClassificationOption, ...]:
        return self._security_classification_dropdown_options

    @property
    def logical_types_for_ids(self) -> Tuple[FieldFormatDropdownOption, ...]:
        return self._logical_types_for_ids

    @property
    def logical_types_for_generic(self) -> Tuple[FieldFormatDropdownOption, ...]:
        return self._logical_types_for_generic

    @property
    def field_identifier_type_values(self) -> Tuple[str, ...]:
        return compliance.field_identifier_type_values

    def default_classification_for(self, logical_type: str) -> Optional[Classification]:
        """Default classification for a logical type, None if the logical type is unknown."""
        if not validate_logical_type(logical_type):
            logger.debug(f"No default classification for unknown logical type {logical_type}")
            return None
        return self._default_field_data_type_classification.get(logical_type)


# Lazy singleton accessor so the tables are built once per process
_metadata_acquisition_service: Optional[MetadataAcquisitionService] = None


def get_metadata_acquisition_service() -> MetadataAcquisitionService:
    global _metadata_acquisition_service
    if _metadata_acquisition_service is None:
        _metadata_acquisition_service = MetadataAcquisitionService()
    return _metadata_acquisition_service
