"""
AST (Abstract Syntax Tree) node definitions for a resolved JSON Schema.

These nodes represent the schema after parsing, reference resolution and
normalization: every ``$ref`` has been replaced by the node it points to,
so the graph may share sub-nodes and may contain cycles.

Nodes compare and hash by identity. A node that carries a standalone name
is declared once at the top level and referenced by that name everywhere
else; a node without one is always rendered inline.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Discriminant of an AST node."""

    ANY = "ANY"
    ARRAY = "ARRAY"
    BOOLEAN = "BOOLEAN"
    ENUM = "ENUM"
    INTERFACE = "INTERFACE"
    INTERSECTION = "INTERSECTION"
    LITERAL = "LITERAL"
    NUMBER = "NUMBER"
    NULL = "NULL"
    OBJECT = "OBJECT"
    REFERENCE = "REFERENCE"
    STRING = "STRING"
    TUPLE = "TUPLE"
    UNION = "UNION"
    CUSTOM_TYPE = "CUSTOM_TYPE"


@dataclass(eq=False, repr=False)
class SchemaNode:
    """Base class for all AST nodes."""

    kind: NodeKind = field(init=False, default=NodeKind.ANY)

    # Name of the top-level declaration for this node, if it needs one
    standalone_name: str | None = field(default=None, kw_only=True)

    # Doc comment attached to the node
    comment: str | None = field(default=None, kw_only=True)

    def __repr__(self) -> str:
        # Children are left out: the graph may be cyclic
        if self.standalone_name is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}(standalone_name={self.standalone_name!r})"


@dataclass(eq=False, repr=False)
class AnyNode(SchemaNode):
    """Represents ``any``."""

    kind: NodeKind = field(init=False, default=NodeKind.ANY)


@dataclass(eq=False, repr=False)
class BooleanNode(SchemaNode):
    kind: NodeKind = field(init=False, default=NodeKind.BOOLEAN)


@dataclass(eq=False, repr=False)
class NumberNode(SchemaNode):
    kind: NodeKind = field(init=False, default=NodeKind.NUMBER)


@dataclass(eq=False, repr=False)
class NullNode(SchemaNode):
    kind: NodeKind = field(init=False, default=NodeKind.NULL)


@dataclass(eq=False, repr=False)
class ObjectNode(SchemaNode):
    """Represents the ``object`` primitive (an object with no known shape)."""

    kind: NodeKind = field(init=False, default=NodeKind.OBJECT)


@dataclass(eq=False, repr=False)
class StringNode(SchemaNode):
    kind: NodeKind = field(init=False, default=NodeKind.STRING)


@dataclass(eq=False, repr=False)
class LiteralNode(SchemaNode):
    """Represents a const value, rendered as its JSON text."""

    kind: NodeKind = field(init=False, default=NodeKind.LITERAL)
    params: Any = None


@dataclass(eq=False, repr=False)
class ReferenceNode(SchemaNode):
    """Represents a type known only by its textual name."""

    kind: NodeKind = field(init=False, default=NodeKind.REFERENCE)
    params: str = ""


@dataclass(eq=False, repr=False)
class CustomTypeNode(SchemaNode):
    """Represents a user supplied type expression (``tsType``)."""

    kind: NodeKind = field(init=False, default=NodeKind.CUSTOM_TYPE)
    params: str = ""


@dataclass(eq=False, repr=False)
class ArrayNode(SchemaNode):
    """Represents an array of a single element type."""

    kind: NodeKind = field(init=False, default=NodeKind.ARRAY)
    params: SchemaNode | None = None


@dataclass(eq=False, repr=False)
class TupleNode(SchemaNode):
    """Represents a fixed-length array with one type per slot."""

    kind: NodeKind = field(init=False, default=NodeKind.TUPLE)
    params: list[SchemaNode] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class UnionNode(SchemaNode):
    """Represents a oneOf / anyOf / multi-type union."""

    kind: NodeKind = field(init=False, default=NodeKind.UNION)
    params: list[SchemaNode] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class IntersectionNode(SchemaNode):
    """Represents an allOf intersection."""

    kind: NodeKind = field(init=False, default=NodeKind.INTERSECTION)
    params: list[SchemaNode] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class InterfaceParam:
    """A property of an interface."""

    key_name: str = ""
    ast: SchemaNode | None = None
    is_required: bool = False

    # Property generated from patternProperties (rendered through an index signature instead)
    is_pattern_property: bool = False

    # Definition kept only so that it gets declared; never rendered as a member
    is_unreachable_definition: bool = False


@dataclass(eq=False, repr=False)
class InterfaceNode(SchemaNode):
    """Represents an object type with known properties."""

    kind: NodeKind = field(init=False, default=NodeKind.INTERFACE)
    params: list[InterfaceParam] = field(default_factory=list)
    super_types: list[InterfaceNode] = field(default_factory=list)


@dataclass(eq=False, repr=False)
class EnumParam:
    """A member of an enum."""

    key_name: str = ""
    ast: SchemaNode | None = None


@dataclass(eq=False, repr=False)
class EnumNode(SchemaNode):
    """Represents a named enum with literal-valued members."""

    kind: NodeKind = field(init=False, default=NodeKind.ENUM)
    params: list[EnumParam] = field(default_factory=list)


SET_OPERATION_NODES = (UnionNode, IntersectionNode)


def has_standalone_name(node: SchemaNode) -> bool:
    """Check whether the node must be declared by name."""
    return node.standalone_name is not None


def has_comment(node: SchemaNode) -> bool:
    """Check whether the node carries a non-empty comment."""
    return bool(node.comment)


def get_super_types_and_params(node: InterfaceNode) -> list[SchemaNode]:
    """Return the property nodes of an interface followed by its super-types."""
    return [param.ast for param in node.params] + list(node.super_types)


def with_standalone_name(node: SchemaNode, name: str | None) -> SchemaNode:
    """Return a shallow copy of the node carrying a different standalone name.

    Children are shared with the original node, which is left untouched.
    """
    renamed = copy.copy(node)
    renamed.standalone_name = name
    return renamed
