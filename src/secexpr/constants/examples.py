"""Built-in example DSL documents, runnable from the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DslExample:
    """A named example document."""

    id: str
    label: str
    dsl: str


EXAMPLES: tuple[DslExample, ...] = (
    DslExample(
        id="multiply",
        label="Simple multiplication",
        dsl="""{
  "expression": {"fn": "*", "a": "sales", "b": 2},
  "security": "ABC"
}""",
    ),
    DslExample(
        id="divide",
        label="Simple division",
        dsl="""{
  "expression": {"fn": "/", "a": "price", "b": "eps"},
  "security": "BCD"
}""",
    ),
    DslExample(
        id="nested",
        label="Nested expression",
        dsl="""{
  "expression": {
    "fn": "-",
    "a": {"fn": "-", "a": "eps", "b": "shares"},
    "b": {"fn": "-", "a": "assets", "b": "liabilities"}
  },
  "security": "CDE"
}""",
    ),
    DslExample(
        id="invalid-json",
        label="Invalid JSON",
        dsl="""{
  "expression": {"fn": "+", "a": "price", "b": "eps"},
  "security": "BCD"
""",
    ),
    DslExample(
        id="invalid-dsl",
        label="Invalid DSL",
        dsl="""{
  "wrong": 123,
  "security": "BCD"
}""",
    ),
    DslExample(
        id="missing-security",
        label="Missing security",
        dsl="""{
  "expression": {"fn": "*", "a": "sales", "b": 2},
  "security": "ZZZ"
}""",
    ),
)

EXAMPLES_BY_ID: dict[str, DslExample] = {example.id: example for example in EXAMPLES}
