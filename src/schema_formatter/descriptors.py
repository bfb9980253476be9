from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from schema_formatter.model import ColumnDefinition, Relation


@dataclass(frozen=True)
class FormattedColumn:
    column: ColumnDefinition
    validator_rule: Optional[str] = None
    sanitisor_rule: Optional[str] = None

    @property
    def name(self) -> str:
        return self.column.name

    @property
    def type(self) -> str:
        return self.column.type

    def to_template_context(self) -> Dict[str, Any]:
        ctx = self.column.model_dump(by_alias=True)
        ctx["validatorRule"] = self.validator_rule
        ctx["sanitisorRule"] = self.sanitisor_rule
        return ctx


@dataclass(frozen=True)
class FormattedRelation:
    relation: Relation
    relation_declaration: str

    @property
    def name(self) -> str:
        return self.relation.name

    @property
    def type(self) -> str:
        return self.relation.type

    def to_template_context(self) -> Dict[str, Any]:
        ctx = self.relation.model_dump(by_alias=True)
        ctx["relationDeclaration"] = self.relation_declaration
        return ctx


@dataclass(frozen=True)
class ModelDescriptor:
    name: str                   # table name
    model_name: str             # class name used for the model file
    columns: Tuple[FormattedColumn, ...] = field(default_factory=tuple)
    relations: Tuple[FormattedRelation, ...] = field(default_factory=tuple)
    disable_timestamp: bool = True
    has_relations: bool = False

    def validator_rules(self) -> list[str]:
        return [c.validator_rule for c in self.columns if c.validator_rule is not None]

    def sanitisor_rules(self) -> list[str]:
        return [c.sanitisor_rule for c in self.columns if c.sanitisor_rule is not None]

    def to_template_context(self) -> Dict[str, Any]:
        """Key layout expected by the model/factory templates."""
        return {
            "name": self.name,
            "modelName": self.model_name,
            "columnsArray": [c.to_template_context() for c in self.columns],
            "relationsArray": [r.to_template_context() for r in self.relations],
            "disableTimestamp": self.disable_timestamp,
            "hasRelations": self.has_relations,
        }
