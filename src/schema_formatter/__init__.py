"""Schema -> model descriptors (validator/sanitiser rules, relation accessors) for scaffolding templates."""
from schema_formatter.model import (
    Schema,
    TableDefinition,
    ColumnDefinition,
    BelongsTo,
    HasOne,
    HasMany,
    HasManyThrough,
    BelongsToMany,
    load_schema,
)
from schema_formatter.descriptors import ModelDescriptor, FormattedColumn, FormattedRelation
from schema_formatter.formatter import SchemaFormatter
from schema_formatter.relations import relation_declaration
from schema_formatter.rules import validator_rule, sanitisor_rule, strip_trailing_separator
from schema_formatter.artifacts import GeneratedFile, model_files, migration_files, factory_file
from schema_formatter.model_writer import to_model_source

__all__ = [
    "Schema",
    "TableDefinition",
    "ColumnDefinition",
    "BelongsTo",
    "HasOne",
    "HasMany",
    "HasManyThrough",
    "BelongsToMany",
    "load_schema",
    "ModelDescriptor",
    "FormattedColumn",
    "FormattedRelation",
    "SchemaFormatter",
    "relation_declaration",
    "validator_rule",
    "sanitisor_rule",
    "strip_trailing_separator",
    "GeneratedFile",
    "model_files",
    "migration_files",
    "factory_file",
    "to_model_source",
]
