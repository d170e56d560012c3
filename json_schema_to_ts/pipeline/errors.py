"""
Exceptions raised by the declaration generator.
"""

from __future__ import annotations

from typing import Any


class GenerationError(Exception):
    """Base class for errors raised while generating declarations."""

    pass


class UnsupportedNodeError(GenerationError, TypeError):
    """Raised when a value that is not a known AST node variant is traversed or rendered."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Unsupported AST node: {node!r}")


class MissingStandaloneNameError(GenerationError, ValueError):
    """Raised when a node that must be declared by name has no standalone name.

    This can happen when:
    - The root node passed to generate() is unnamed
    - An enum reaches the enum declaration pass without a name
    - An interface extends a super-type that has no name
    """

    def __init__(self, node: Any, role: str):
        self.node = node
        self.role = role
        super().__init__(f"{role} must have a standalone name: {node!r}")
