"""Validator and sanitiser rule strings for generated model columns.

Each rule is emitted as one line of an object literal in the model template,
e.g. ``email: 'string|required|unique|max:255',``.
"""
from __future__ import annotations
from typing import Optional, Sequence, List

from schema_formatter.model import ColumnDefinition

RULE_SEPARATOR = "|"
LIST_SEPARATOR = ","

STRING_TYPES = ("text", "string")
INTEGER_TYPES = ("integer", "bigInteger")
NUMBER_TYPES = ("decimal", "float")
DATE_TYPES = ("date", "time", "dateTime")


def is_string_type(column_type: str) -> bool:
    # any *Text type (mediumText, longText ...) counts as a string
    return column_type in STRING_TYPES or "Text" in column_type


def has_rules(column: ColumnDefinition) -> bool:
    """Auto-increment keys and foreign keys are never validated or sanitised."""
    return column.type != "increments" and not column.foreign_key


def _rule_line(column: ColumnDefinition, body: str) -> str:
    return f"{column.name}: '{body}'{LIST_SEPARATOR}"


# ---------- validator ----------

def validator_type(column: ColumnDefinition) -> str:
    t = column.type
    if t == "timestamp":
        return "integer"
    if is_string_type(t):
        return "string"
    if t in INTEGER_TYPES:
        return "integer|above:0" if column.unsigned else "integer"
    if t in NUMBER_TYPES:
        return "number"
    if t in DATE_TYPES:
        return "date"
    if t == "boolean":
        return "boolean"
    return ""


def required(column: ColumnDefinition) -> str:
    return "" if column.nullable else f"{RULE_SEPARATOR}required"


def unique(column: ColumnDefinition) -> str:
    return f"{RULE_SEPARATOR}unique" if column.unique else ""


def max_length(column: ColumnDefinition) -> str:
    return f"{RULE_SEPARATOR}max:{column.length}" if column.length else ""


def validator_rule(column: ColumnDefinition) -> Optional[str]:
    if not has_rules(column):
        return None

    # modifiers carry their own separator and concatenate onto the type token
    tokens = [
        validator_type(column),
        required(column),
        unique(column),
        max_length(column),
    ]
    return _rule_line(column, "".join(tokens))


# ---------- sanitiser ----------

def sanitisor_type(column: ColumnDefinition) -> str:
    t = column.type
    if t == "timestamp" or t in INTEGER_TYPES:
        return "to_int"
    if is_string_type(t):
        return "strip_tags"
    if t in NUMBER_TYPES:
        return "to_float"
    if t in DATE_TYPES:
        return "to_date"
    if t == "boolean":
        return "to_boolean"
    return ""


def sanitisor_rule(column: ColumnDefinition) -> Optional[str]:
    if not has_rules(column):
        return None
    return _rule_line(column, sanitisor_type(column))


# ---------- post-pass ----------

def strip_trailing_separator(rules: Sequence[Optional[str]]) -> List[Optional[str]]:
    """
    Drop the list separator from the last emitted rule so the generated
    object literal does not end with a dangling comma.
    """
    out = list(rules)
    for i in range(len(out) - 1, -1, -1):
        rule = out[i]
        if rule is None:
            continue
        if rule.endswith(LIST_SEPARATOR):
            out[i] = rule[: -len(LIST_SEPARATOR)]
        break
    return out
