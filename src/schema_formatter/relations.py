"""Relation accessor bodies for generated models.

The returned strings are pasted verbatim into the model template as the body
of the relation method, so argument order and quoting are fixed.
"""
from __future__ import annotations
from typing import Optional

from schema_formatter.config import settings
from schema_formatter.model import (
    BelongsTo,
    BelongsToMany,
    HasMany,
    HasManyThrough,
    HasOne,
    Relation,
)


def _args(*values: str) -> str:
    return ", ".join(f"'{v}'" for v in values)


def _model_path(namespace: str, related_model: str) -> str:
    return f"{namespace}/{related_model}"


def _keyed_args(ns: str, relation: Relation) -> str:
    return _args(_model_path(ns, relation.related_model), relation.primary_key, relation.foreign_key)


def relation_declaration(relation: Relation, namespace: Optional[str] = None) -> str:
    ns = settings.models_namespace if namespace is None else namespace

    if isinstance(relation, BelongsTo):
        return f"return this.belongsTo({_keyed_args(ns, relation)})"

    if isinstance(relation, HasOne):
        return f"return this.hasOne({_keyed_args(ns, relation)})"

    if isinstance(relation, HasMany):
        return f"return this.hasMany({_keyed_args(ns, relation)})"

    if isinstance(relation, HasManyThrough):
        args = _args(
            _model_path(ns, relation.related_model),
            relation.related_method,
            relation.primary_key,
            relation.foreign_key,
        )
        return f"return this.hasManyThrough({args})"

    if isinstance(relation, BelongsToMany):
        args = _args(
            _model_path(ns, relation.related_model),
            relation.foreign_key,
            relation.related_foreign_key,
            relation.primary_key,
            relation.related_primary_key,
        )
        with_timestamps = ".withTimestamps()" if relation.with_timestamps else ""
        return f"return this.belongsToMany({args}).pivotTable('{relation.pivot_table}'){with_timestamps}"

    raise TypeError(f"Unsupported relation: {type(relation).__name__}")
