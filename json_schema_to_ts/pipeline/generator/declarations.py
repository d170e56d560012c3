"""
Declaration passes over the AST graph.

Three independent walks collect the top-level declarations of a schema:

1. declare_named_types: ``export type`` aliases for named non-interface,
   non-enum nodes
2. declare_named_interfaces: ``export interface`` declarations
3. declare_enums: ``export enum`` declarations

Every walk marks a node as processed before visiting its children, so a
node shared by several parents is declared once and a cycle terminates at
its first revisit.
"""

from __future__ import annotations

import logging

from ..config import GeneratorOptions
from ..errors import UnsupportedNodeError
from ..schema_ast.nodes import (
    AnyNode,
    ArrayNode,
    BooleanNode,
    CustomTypeNode,
    EnumNode,
    InterfaceNode,
    IntersectionNode,
    LiteralNode,
    NullNode,
    NumberNode,
    ObjectNode,
    ReferenceNode,
    SchemaNode,
    StringNode,
    TupleNode,
    UnionNode,
    get_super_types_and_params,
    has_standalone_name,
)
from .context import ProcessedSet
from .formatters import render_standalone_enum, render_standalone_interface, render_standalone_type

logger = logging.getLogger(__name__)

SCALAR_NODES = (
    AnyNode,
    BooleanNode,
    CustomTypeNode,
    LiteralNode,
    NullNode,
    NumberNode,
    ObjectNode,
    ReferenceNode,
    StringNode,
)


def _join(parts: list[str]) -> str:
    return "\n".join(part for part in parts if part)


def _enter(node: SchemaNode, processed: ProcessedSet) -> bool:
    """Mark the node as processed; return False if it already was."""
    if not isinstance(node, SchemaNode):
        raise UnsupportedNodeError(node)
    if processed.contains(node):
        return False
    processed.add(node)
    return True


def _declare_type(node: SchemaNode, options: GeneratorOptions) -> str:
    logger.debug("Declaring type %s", node.standalone_name)
    return render_standalone_type(node, options)


def declare_named_types(node: SchemaNode, options: GeneratorOptions, processed: ProcessedSet) -> str:
    """
    Collect ``export type`` declarations reachable from a node.

    Interfaces and enums are traversed but not declared here; they have
    their own passes.

    Args:
        node: The node to start from
        options: Generator options
        processed: Nodes already visited by this pass; updated in place

    Returns:
        Newline-separated declarations, or "" if there are none
    """
    if not _enter(node, processed):
        return ""

    match node:
        case ArrayNode():
            return _join(
                [
                    declare_named_types(node.params, options, processed),
                    _declare_type(node, options) if has_standalone_name(node) else "",
                ]
            )
        case EnumNode():
            return ""
        case InterfaceNode():
            return _join([declare_named_types(child, options, processed) for child in get_super_types_and_params(node)])
        case IntersectionNode() | TupleNode() | UnionNode():
            own = _declare_type(node, options) if has_standalone_name(node) else ""
            return _join([own] + [declare_named_types(member, options, processed) for member in node.params])
        case _ if isinstance(node, SCALAR_NODES):
            return _declare_type(node, options) if has_standalone_name(node) else ""
        case _:
            raise UnsupportedNodeError(node)


def declare_named_interfaces(
    node: SchemaNode,
    options: GeneratorOptions,
    root_name: str,
    processed: ProcessedSet,
) -> str:
    """
    Collect ``export interface`` declarations reachable from a node.

    A named interface is declared when it is the root itself, or when
    options.declare_externally_referenced is set.

    Args:
        node: The node to start from
        options: Generator options
        root_name: Standalone name of the root node of the run
        processed: Nodes already visited by this pass; updated in place

    Returns:
        Newline-separated declarations, or "" if there are none
    """
    if not _enter(node, processed):
        return ""

    match node:
        case ArrayNode():
            return declare_named_interfaces(node.params, options, root_name, processed)
        case InterfaceNode():
            own = ""
            if has_standalone_name(node) and (
                node.standalone_name == root_name or options.declare_externally_referenced
            ):
                logger.debug("Declaring interface %s", node.standalone_name)
                own = render_standalone_interface(node, options)
            children = [
                declare_named_interfaces(child, options, root_name, processed)
                for child in get_super_types_and_params(node)
            ]
            return _join([own] + children)
        case IntersectionNode() | UnionNode():
            return _join([declare_named_interfaces(member, options, root_name, processed) for member in node.params])
        case EnumNode() | TupleNode():
            return ""
        case _ if isinstance(node, SCALAR_NODES):
            return ""
        case _:
            raise UnsupportedNodeError(node)


def declare_enums(node: SchemaNode, options: GeneratorOptions, processed: ProcessedSet) -> str:
    """
    Collect ``export enum`` declarations reachable from a node.

    Only arrays, tuples and interfaces are descended into.

    Args:
        node: The node to start from
        options: Generator options
        processed: Nodes already visited by this pass; updated in place

    Returns:
        Newline-separated declarations, or "" if there are none
    """
    if not _enter(node, processed):
        return ""

    match node:
        case EnumNode():
            logger.debug("Declaring enum %s", node.standalone_name)
            return render_standalone_enum(node, options)
        case ArrayNode():
            return declare_enums(node.params, options, processed)
        case TupleNode():
            return _join([declare_enums(member, options, processed) for member in node.params])
        case InterfaceNode():
            return _join([declare_enums(child, options, processed) for child in get_super_types_and_params(node)])
        case IntersectionNode() | UnionNode():
            return ""
        case _ if isinstance(node, SCALAR_NODES):
            return ""
        case _:
            raise UnsupportedNodeError(node)
