from __future__ import annotations
import re

_WORD_SPLIT_RE = re.compile(r"[_\-\s]+")

IRREGULAR_SINGULARS = {
    "people": "person",
    "children": "child",
    "men": "man",
    "women": "woman",
    "menus": "menu",
}

UNCOUNTABLE = {"news", "series", "species", "data", "information"}

# already singular: status, campus, analysis, address
_SINGULAR_SUFFIXES = ("ss", "us", "is")

# suffixes whose plural adds "es" (addresses, statuses, boxes, matches ...)
_ES_SUFFIXES = ("sses", "uses", "shes", "ches", "xes", "zes")


def singularize(word: str) -> str:
    lower = word.lower()
    if lower in IRREGULAR_SINGULARS:
        single = IRREGULAR_SINGULARS[lower]
        return word[:1] + single[1:] if word[:1].isupper() else single
    if lower in UNCOUNTABLE or lower.endswith(_SINGULAR_SUFFIXES):
        return word
    if lower.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if lower.endswith(_ES_SUFFIXES):
        return word[:-2]
    if lower.endswith("s") and len(word) > 1:
        return word[:-1]
    return word


def _upper_first(s: str) -> str:
    return s[:1].upper() + s[1:]


def pascal_case(name: str) -> str:
    return "".join(_upper_first(p) for p in _WORD_SPLIT_RE.split(name) if p)


def model_name(table_name: str) -> str:
    """users -> User, user_roles -> UserRole, categories -> Category"""
    parts = [p for p in _WORD_SPLIT_RE.split(table_name) if p]
    if not parts:
        return ""
    parts[-1] = singularize(parts[-1])
    return "".join(_upper_first(p) for p in parts)


def migration_class_name(table_name: str) -> str:
    return f"{pascal_case(table_name)}Schema"
