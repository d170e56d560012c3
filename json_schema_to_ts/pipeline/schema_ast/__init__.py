"""
Schema AST (Abstract Syntax Tree) module.

Contains the node definitions of a resolved JSON Schema.
"""

from __future__ import annotations

from .nodes import (
    AnyNode,
    ArrayNode,
    BooleanNode,
    CustomTypeNode,
    EnumNode,
    EnumParam,
    InterfaceNode,
    InterfaceParam,
    IntersectionNode,
    LiteralNode,
    NodeKind,
    NullNode,
    NumberNode,
    ObjectNode,
    ReferenceNode,
    SchemaNode,
    StringNode,
    TupleNode,
    UnionNode,
)

__all__ = [
    "NodeKind",
    "SchemaNode",
    "AnyNode",
    "ArrayNode",
    "BooleanNode",
    "CustomTypeNode",
    "EnumNode",
    "EnumParam",
    "InterfaceNode",
    "InterfaceParam",
    "IntersectionNode",
    "LiteralNode",
    "NullNode",
    "NumberNode",
    "ObjectNode",
    "ReferenceNode",
    "StringNode",
    "TupleNode",
    "UnionNode",
]
