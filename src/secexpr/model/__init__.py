"""Core data models for secexpr."""

from .entities import Attribute, ExecutionResult, Fact, Security

__all__ = [
    "Attribute",
    "ExecutionResult",
    "Fact",
    "Security",
]
