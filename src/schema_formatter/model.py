"""Input schema: tables, columns and relations as the schema author declares them."""
from __future__ import annotations
import json
from pathlib import Path
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _SchemaModel(BaseModel):
    # schema files use camelCase keys (isLink, foreignKey, relatedModel ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ColumnDefinition(_SchemaModel):
    name: str = ""
    type: str                   # increments / integer / string / mediumText / dateTime ...
    nullable: bool = False
    unique: bool = False
    length: Optional[int] = None
    unsigned: bool = False
    foreign_key: bool = False


class _KeyedRelation(_SchemaModel):
    name: str = ""
    related_model: str
    primary_key: str
    foreign_key: str


class BelongsTo(_KeyedRelation):
    type: Literal["belongsTo"]


class HasOne(_KeyedRelation):
    type: Literal["hasOne"]


class HasMany(_KeyedRelation):
    type: Literal["hasMany"]


class HasManyThrough(_KeyedRelation):
    type: Literal["hasManyThrough"]
    related_method: str


class BelongsToMany(_KeyedRelation):
    type: Literal["belongsToMany"]
    related_foreign_key: str
    related_primary_key: str
    pivot_table: str
    with_timestamps: bool = False


Relation = Annotated[
    Union[BelongsTo, HasOne, HasMany, HasManyThrough, BelongsToMany],
    Field(discriminator="type"),
]


def _lower_first(s: str) -> str:
    return s[:1].lower() + s[1:]


def _keyed(entries: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Write each mapping key into its entry's ``name`` without touching the caller's objects."""
    if entries is None:
        return {}
    named: Dict[str, Any] = {}
    for key, entry in entries.items():
        if isinstance(entry, BaseModel):
            named[key] = entry.model_copy(update={"name": key})
        else:
            named[key] = {**entry, "name": key}
    return named


class TableDefinition(_SchemaModel):
    name: str = ""
    is_link: bool = False       # pivot/join table: gets a migration, never a model
    timestamp: bool = False
    columns: Dict[str, ColumnDefinition] = Field(default_factory=dict)
    relations: Dict[str, Relation] = Field(default_factory=dict)

    @field_validator("columns", mode="before")
    @classmethod
    def _name_columns(cls, v: Any) -> Dict[str, Any]:
        return _keyed(v)

    @field_validator("relations", mode="before")
    @classmethod
    def _name_relations(cls, v: Any) -> Dict[str, Any]:
        named = _keyed(v)
        for key, entry in named.items():
            # BelongsTo and belongsTo select the same variant
            if isinstance(entry, dict) and isinstance(entry.get("type"), str):
                named[key] = {**entry, "type": _lower_first(entry["type"])}
        return named


class Schema(_SchemaModel):
    tables: Dict[str, TableDefinition] = Field(default_factory=dict)

    @field_validator("tables", mode="before")
    @classmethod
    def _name_tables(cls, v: Any) -> Dict[str, Any]:
        return _keyed(v)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Schema":
        return cls(tables=data)

    def table_list(self) -> list[TableDefinition]:
        return list(self.tables.values())


def as_schema(schema: Union[Schema, Mapping[str, Any]]) -> Schema:
    if isinstance(schema, Schema):
        return schema
    return Schema.from_mapping(schema)


def load_schema(path: Path) -> Schema:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return Schema.from_mapping(data)
