"""Entity dataclasses for securities, attributes, facts and results."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from secexpr.types.common import JsonValue


@dataclass(frozen=True)
class Security:
    """A financial instrument, looked up by symbol."""

    id: int
    symbol: str
    extra: dict[str, JsonValue] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Attribute:
    """A named numeric property resolvable per security."""

    id: int
    name: str
    extra: dict[str, JsonValue] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Fact:
    """The stored value of one attribute for one security."""

    security_id: int
    attribute_id: int
    value: int | float


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of executing a DSL document.

    Unpacks as ``(success, value, message)``.
    """

    success: bool
    value: int | float
    message: str
    code: str = ""

    def __iter__(self) -> Iterator[bool | int | float | str]:
        return iter((self.success, self.value, self.message))

    def to_dict(self) -> dict[str, JsonValue]:
        """Return a JSON-serializable representation."""
        return {
            "success": self.success,
            "value": self.value,
            "message": self.message,
            "code": self.code,
        }
