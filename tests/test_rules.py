"""
Column rule derivation.

Run with:
    pytest tests/test_rules.py -v
"""
import pytest

from schema_formatter.model import ColumnDefinition
from schema_formatter.rules import (
    sanitisor_rule,
    strip_trailing_separator,
    validator_rule,
    validator_type,
)


def col(name="field", **kw):
    kw.setdefault("type", "string")
    return ColumnDefinition(name=name, **kw)


class TestSuppressedColumns:
    @pytest.mark.parametrize("column", [
        col("id", type="increments"),
        col("user_id", type="integer", foreign_key=True),
        col("owner", type="string", foreign_key=True, unique=True),
    ])
    def test_no_rules_for_keys(self, column):
        assert validator_rule(column) is None
        assert sanitisor_rule(column) is None


class TestValidatorRule:
    def test_string_all_modifiers(self):
        rule = validator_rule(col("name", nullable=False, unique=True, length=50))
        assert rule == "name: 'string|required|unique|max:50',"

    def test_nullable_drops_required(self):
        assert validator_rule(col("nick", nullable=True)) == "nick: 'string',"

    def test_zero_length_is_ignored(self):
        assert validator_rule(col("nick", nullable=True, length=0)) == "nick: 'string',"

    def test_unsigned_integer(self):
        rule = validator_rule(col("age", type="integer", unsigned=True))
        assert rule == "age: 'integer|above:0|required',"

    def test_signed_big_integer(self):
        assert validator_rule(col("delta", type="bigInteger", nullable=True)) == "delta: 'integer',"

    def test_timestamp_validates_as_integer(self):
        assert validator_rule(col("seen", type="timestamp", nullable=True)) == "seen: 'integer',"

    def test_unknown_nullable_type_is_empty(self):
        assert validator_rule(col("payload", type="json", nullable=True)) == "payload: '',"

    @pytest.mark.parametrize("flags, body", [
        ({}, "|required"),
        ({"nullable": True, "unique": True}, "|unique"),
        ({"nullable": True, "length": 36}, "|max:36"),
        ({"unique": True}, "|required|unique"),
        ({"length": 36}, "|required|max:36"),
        ({"nullable": True, "unique": True, "length": 36}, "|unique|max:36"),
        ({"unique": True, "length": 36}, "|required|unique|max:36"),
    ])
    def test_unknown_type_keeps_modifier_separators(self, flags, body):
        # modifiers concatenate onto an empty type token unchanged
        assert validator_rule(col("payload", type="uuid", **flags)) == f"payload: '{body}',"

    @pytest.mark.parametrize("column_type, token", [
        ("timestamp", "integer"),
        ("text", "string"),
        ("string", "string"),
        ("mediumText", "string"),
        ("longText", "string"),
        ("integer", "integer"),
        ("bigInteger", "integer"),
        ("decimal", "number"),
        ("float", "number"),
        ("date", "date"),
        ("time", "date"),
        ("dateTime", "date"),
        ("boolean", "boolean"),
        ("uuid", ""),
    ])
    def test_type_token(self, column_type, token):
        assert validator_type(col(type=column_type)) == token

    def test_text_substring_match(self):
        # any type containing "Text" is treated as a string
        assert validator_type(col(type="customTextBlob")) == "string"
        assert validator_type(col(type="context")) == ""


class TestSanitisorRule:
    def test_boolean(self):
        assert sanitisor_rule(col("active", type="boolean")) == "active: 'to_boolean',"

    def test_datetime(self):
        assert sanitisor_rule(col("published_at", type="dateTime")) == "published_at: 'to_date',"

    def test_ignores_modifiers(self):
        column = col("email", unique=True, length=255)
        assert sanitisor_rule(column) == "email: 'strip_tags',"

    @pytest.mark.parametrize("column_type, token", [
        ("timestamp", "to_int"),
        ("integer", "to_int"),
        ("bigInteger", "to_int"),
        ("longText", "strip_tags"),
        ("decimal", "to_float"),
        ("float", "to_float"),
        ("time", "to_date"),
        ("json", ""),
    ])
    def test_token(self, column_type, token):
        assert sanitisor_rule(col("f", type=column_type)) == f"f: '{token}',"


class TestStripTrailingSeparator:
    def test_strips_last_rule(self):
        assert strip_trailing_separator(["a: 'x',", "b: 'y',"]) == ["a: 'x',", "b: 'y'"]

    def test_skips_trailing_nulls(self):
        rules = ["a: 'x',", "b: 'y',", None, None]
        assert strip_trailing_separator(rules) == ["a: 'x',", "b: 'y'", None, None]

    def test_all_null(self):
        assert strip_trailing_separator([None, None]) == [None, None]

    def test_empty(self):
        assert strip_trailing_separator([]) == []

    def test_does_not_modify_input(self):
        rules = ["a: 'x',"]
        strip_trailing_separator(rules)
        assert rules == ["a: 'x',"]

    def test_only_one_separator_removed(self):
        assert strip_trailing_separator(["a: 'x',,"]) == ["a: 'x',"]
