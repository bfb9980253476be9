"""ModelDescriptor -> Lucid model source."""
from __future__ import annotations
from schema_formatter.descriptors import ModelDescriptor

INDENT = "  "


def _getter(name: str, body: list[str]) -> list[str]:
    lines = [f"{INDENT}static get {name} () {{"]
    lines += [f"{INDENT * 2}{b}" for b in body]
    lines.append(f"{INDENT}}}")
    return lines


def _object_literal(rules: list[str]) -> list[str]:
    # rules already carry their list separators (last one stripped)
    return ["return {", *[f"{INDENT}{r}" for r in rules], "}"]


def _blocks(model: ModelDescriptor) -> list[list[str]]:
    blocks = [_getter("table", [f"return '{model.name}'"])]

    if model.disable_timestamp:
        blocks.append(_getter("createdAtColumn", ["return null"]))
        blocks.append(_getter("updatedAtColumn", ["return null"]))

    validators = model.validator_rules()
    if validators:
        blocks.append(_getter("rules", _object_literal(validators)))

    sanitisors = model.sanitisor_rules()
    if sanitisors:
        blocks.append(_getter("sanitizationRules", _object_literal(sanitisors)))

    for rel in model.relations:
        blocks.append([
            f"{INDENT}{rel.name} () {{",
            f"{INDENT * 2}{rel.relation_declaration}",
            f"{INDENT}}}",
        ])
    return blocks


def to_model_source(model: ModelDescriptor) -> str:
    lines: list[str] = []
    lines.append("'use strict'\n")
    lines.append("const Model = use('Model')\n")
    lines.append(f"class {model.model_name} extends Model {{")

    for i, block in enumerate(_blocks(model)):
        if i:
            lines.append("")
        lines.extend(block)

    lines.append("}\n")
    lines.append(f"module.exports = {model.model_name}")
    lines.append("")
    return "\n".join(lines)
