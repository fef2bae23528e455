"""Immutable in-memory store for the three static lookup tables."""

from __future__ import annotations

from collections.abc import Iterable

from secexpr.model import Attribute, Fact, Security


class StaticDataStore:
    """Read-only securities, attributes and facts with key lookups.

    Indexes are built once at construction. When a key appears more than
    once, the first row wins.
    """

    def __init__(
        self,
        securities: Iterable[Security] = (),
        attributes: Iterable[Attribute] = (),
        facts: Iterable[Fact] = (),
    ) -> None:
        self._securities: tuple[Security, ...] = tuple(securities)
        self._attributes: tuple[Attribute, ...] = tuple(attributes)
        self._facts: tuple[Fact, ...] = tuple(facts)

        self._by_symbol: dict[str, Security] = {}
        for security in self._securities:
            self._by_symbol.setdefault(security.symbol, security)

        self._by_name: dict[str, Attribute] = {}
        for attribute in self._attributes:
            self._by_name.setdefault(attribute.name, attribute)

        self._by_key: dict[tuple[int, int], Fact] = {}
        for fact in self._facts:
            self._by_key.setdefault((fact.attribute_id, fact.security_id), fact)

    @property
    def securities(self) -> tuple[Security, ...]:
        return self._securities

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        return self._attributes

    @property
    def facts(self) -> tuple[Fact, ...]:
        return self._facts

    def security_by_symbol(self, symbol: str) -> Security | None:
        """Return the security with an exactly matching symbol."""
        return self._by_symbol.get(symbol)

    def attribute_by_name(self, name: str) -> Attribute | None:
        """Return the attribute with an exactly matching name."""
        return self._by_name.get(name)

    def fact_by_attribute_and_security(self, attribute_id: int, security_id: int) -> Fact | None:
        """Return the fact joining *attribute_id* and *security_id*."""
        return self._by_key.get((attribute_id, security_id))

    def __repr__(self) -> str:
        return (
            f"StaticDataStore(securities={len(self._securities)}, "
            f"attributes={len(self._attributes)}, facts={len(self._facts)})"
        )
