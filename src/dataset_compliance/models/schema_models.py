"""
Schema metadata models for a dataset catalog entry.

A SchemaDefinition carries the raw schema observed on the source platform
(one of a closed set of platform specific formats) and, independently, the
normalized representation derived from it. Either part may be absent.

Producers emit camelCase JSON; models accept camelCase or snake_case keys and
dump back to camelCase with ``by_alias=True``.
"""
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _SchemaModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# Raw schema variants
class EspressoSchema(_SchemaModel):
    schema_type: Literal["espresso"] = "espresso"
    document_schema: str
    table_schema: str


class OracleDDL(_SchemaModel):
    schema_type: Literal["oracleDDL"] = "oracleDDL"
    table_schema: str


class MySqlDDL(_SchemaModel):
    schema_type: Literal["mySqlDDL"] = "mySqlDDL"
    table_schema: str


class PrestoDDL(_SchemaModel):
    schema_type: Literal["prestoDDL"] = "prestoDDL"
    raw_schema: str


class KafkaSchema(_SchemaModel):
    schema_type: Literal["kafka"] = "kafka"
    document_schema: str
    key_schema: Optional[str] = None


class BinaryJsonSchema(_SchemaModel):
    schema_type: Literal["binaryJson"] = "binaryJson"
    document_schema: str


class OrcSchema(_SchemaModel):
    schema_type: Literal["orc"] = "orc"
    document_schema: str


class KeyValueSchema(_SchemaModel):
    schema_type: Literal["keyValue"] = "keyValue"
    key_schema: str
    value_schema: str


class Schemaless(_SchemaModel):
    """Marker for datasets that carry no declared schema."""
    schema_type: Literal["schemaless"] = "schemaless"


class OtherSchema(_SchemaModel):
    """Any platform format without a dedicated variant."""
    schema_type: Literal["other"] = "other"
    raw_schema: str


RawSchema = Annotated[
    Union[
        EspressoSchema,
        OracleDDL,
        MySqlDDL,
        PrestoDDL,
        KafkaSchema,
        BinaryJsonSchema,
        OrcSchema,
        KeyValueSchema,
        Schemaless,
        OtherSchema,
    ],
    Field(discriminator="schema_type"),
]


# Normalized schema
class SchemaField(_SchemaModel):
    """A single field of a normalized schema."""
    field_path: str
    native_data_type: str
    nullable: bool = False
    description: Optional[str] = None


# Platform independent representation of a dataset schema
NormalizedSchema = Tuple[SchemaField, ...]


class SchemaDefinition(_SchemaModel):
    """Raw and normalized schema metadata; both parts are independently optional."""
    raw_schema: Optional[RawSchema] = None
    normalized_schema: Optional[NormalizedSchema] = None
