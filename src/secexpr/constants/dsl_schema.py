"""Schema constants and diagnostic messages for DSL documents."""

from __future__ import annotations

ROOT_KEYS: frozenset[str] = frozenset({"security", "expression"})
EXPRESSION_KEYS: frozenset[str] = frozenset({"fn", "a", "b"})
VALID_OPERATORS: frozenset[str] = frozenset({"+", "-", "*", "/"})

ROOT_LOCATION: str = "root"
EXPRESSION_LOCATION: str = "expression"

MSG_INVALID_JSON: str = "Invalid JSON."
MSG_SECURITY_INVALID: str = '"security" field is missing or not a valid type in root.'
MSG_EXPRESSION_INVALID: str = '"expression" field is missing or not a valid type in root.'
MSG_ROOT_TOO_MANY_FIELDS: str = "Too many fields in root."
MSG_EXPRESSION_MISSING_FIELD: str = 'Missing field in "expression": '
MSG_EXPRESSION_TOO_MANY_FIELDS: str = 'Too many fields in "expression": '
MSG_INVALID_OPERATOR: str = '"fn" field is not a valid type: '
MSG_INVALID_OPERAND: str = "{side} field is not a valid type: {value}"
MSG_TOO_DEEP: str = 'Too many nested levels in "expression".'

MSG_SECURITY_NOT_FOUND: str = "Security ({symbol}) could not be found."
MSG_ATTRIBUTE_NOT_FOUND: str = "Attribute ({name}) could not be found."
MSG_FACT_NOT_FOUND: str = "Value not found for {name}."
MSG_UNEXPECTED_FAILURE: str = "Something was wrong executing the DSL."

HINT_OPERATOR: str = "expected one of: " + " ".join(sorted(VALID_OPERATORS))
HINT_OPERAND: str = "expected a number, an attribute name or a nested expression"
