from __future__ import annotations
import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from schema_formatter.config import settings
from schema_formatter.descriptors import FormattedColumn, FormattedRelation, ModelDescriptor
from schema_formatter.model import Schema, TableDefinition, as_schema
from schema_formatter.naming import model_name
from schema_formatter.relations import relation_declaration
from schema_formatter.rules import sanitisor_rule, strip_trailing_separator, validator_rule

logger = logging.getLogger(__name__)


class SchemaFormatter:
    """
    Turns a schema into the model descriptors consumed by the model templates.

    - link (pivot) tables are skipped
    - table, column and relation order follow the schema's key order
    - the schema is never modified; every call builds fresh descriptors
    """

    def __init__(self, namespace: Optional[str] = None):
        self.namespace = settings.models_namespace if namespace is None else namespace

    def format(self, schema: Union[Schema, Mapping[str, Any]]) -> List[ModelDescriptor]:
        tables = as_schema(schema).table_list()
        models = [t for t in tables if not t.is_link]
        logger.debug("Formatting %d tables (%d link tables skipped)", len(models), len(tables) - len(models))
        return [self.format_table(t) for t in models]

    def format_table(self, table: TableDefinition) -> ModelDescriptor:
        columns = self._format_columns(table.columns.values())
        relations = tuple(
            FormattedRelation(r, relation_declaration(r, self.namespace))
            for r in table.relations.values()
        )
        return ModelDescriptor(
            name=table.name,
            model_name=model_name(table.name),
            columns=columns,
            relations=relations,
            disable_timestamp=not table.timestamp,
            has_relations=bool(relations),
        )

    def _format_columns(self, columns: Iterable) -> tuple[FormattedColumn, ...]:
        cols = list(columns)
        validators = strip_trailing_separator([validator_rule(c) for c in cols])
        sanitisors = strip_trailing_separator([sanitisor_rule(c) for c in cols])
        return tuple(
            FormattedColumn(c, validator_rule=v, sanitisor_rule=s)
            for c, v, s in zip(cols, validators, sanitisors)
        )
