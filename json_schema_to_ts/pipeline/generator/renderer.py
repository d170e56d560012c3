"""
Inline rendering of AST nodes as TypeScript type expressions.

Rendering is pure: a named node renders as its identifier and is trusted
to be declared elsewhere, so the renderer never follows a cycle through a
named node. An unnamed node is expanded in place.
"""

from __future__ import annotations

import json
import logging
import re

from ...utils import to_safe_string
from ..config import GeneratorOptions
from ..errors import UnsupportedNodeError
from ..schema_ast.nodes import (
    AnyNode,
    ArrayNode,
    BooleanNode,
    CustomTypeNode,
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
    has_comment,
    has_standalone_name,
)
from .templates import render_comment

logger = logging.getLogger(__name__)

INDEX_SIGNATURE_KEY = "[k: string]"

_IDENTIFIER_START_PATTERN = re.compile(r"[A-Za-z_$]")
_IDENTIFIER_PATTERN = re.compile(r"[\w$]+", re.ASCII)

def render_type(node: SchemaNode, options: GeneratorOptions) -> str:
    """
    Render a node as an inline TypeScript type expression.

    Args:
        node: The node to render
        options: Generator options

    Returns:
        The type expression (e.g. "string", "Foo[]", "(A | B)")
    """
    if not isinstance(node, SchemaNode):
        raise UnsupportedNodeError(node)

    logger.debug("Rendering %r", node)

    if has_standalone_name(node):
        return to_safe_string(node.standalone_name)

    match node:
        case AnyNode():
            return "any"
        case ArrayNode():
            # A multi-member set operation renders parenthesized: "(a | b)[]"
            return render_type(node.params, options) + "[]"
        case BooleanNode():
            return "boolean"
        case InterfaceNode():
            return render_interface_body(node, options)
        case IntersectionNode() | UnionNode():
            return render_set_operation(node, options)
        case LiteralNode():
            return json.dumps(node.params, ensure_ascii=False, separators=(",", ":"))
        case NumberNode():
            return "number"
        case NullNode():
            return "null"
        case ObjectNode():
            return "object"
        case ReferenceNode() | CustomTypeNode():
            return node.params
        case StringNode():
            return "string"
        case TupleNode():
            return "[" + ", ".join(render_type(param, options) for param in node.params) + "]"
        case _:
            raise UnsupportedNodeError(node)


def render_set_operation(node: UnionNode | IntersectionNode, options: GeneratorOptions) -> str:
    """Render a union or intersection; a single member renders bare."""
    members = [render_type(param, options) for param in node.params]
    if len(members) == 1:
        return members[0]
    separator = " | " if isinstance(node, UnionNode) else " & "
    return "(" + separator.join(members) + ")"


def render_interface_body(node: InterfaceNode, options: GeneratorOptions) -> str:
    """
    Render the brace-delimited member list of an interface.

    Pattern properties and unreachable definitions are not members. A
    member's comment is rendered here only when the member type is inline;
    a named member type carries its comment on its own declaration.
    """
    lines = []
    for param in node.params:
        if param.is_pattern_property or param.is_unreachable_definition:
            continue
        rendered = render_type(param.ast, options)
        member = ""
        if has_comment(param.ast) and not has_standalone_name(param.ast):
            member += render_comment(param.ast.comment) + "\n"
        member += escape_key_name(param.key_name)
        member += "" if param.is_required else "?"
        member += ": " + rendered
        lines.append(member)
    return "{\n" + "\n".join(lines) + "\n}"


def escape_key_name(key_name: str) -> str:
    """
    Escape a property key for use in an interface body.

    Identifiers and the index signature key are emitted bare; anything else
    is emitted as a quoted string.
    """
    if key_name and _IDENTIFIER_START_PATTERN.match(key_name) and _IDENTIFIER_PATTERN.fullmatch(key_name):
        return key_name
    if key_name == INDEX_SIGNATURE_KEY:
        return key_name
    return json.dumps(key_name, ensure_ascii=False)
