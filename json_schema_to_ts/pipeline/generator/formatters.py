"""
Standalone declaration formatters.

Each formatter renders one top-level declaration (enum, interface or type
alias) from its template, with the node's comment block above it.
"""

from __future__ import annotations

from ...utils import to_safe_string
from ..config import GeneratorOptions
from ..errors import MissingStandaloneNameError
from ..schema_ast.nodes import (
    EnumNode,
    InterfaceNode,
    SchemaNode,
    has_comment,
    has_standalone_name,
    with_standalone_name,
)
from .renderer import render_interface_body, render_type
from .templates import get_template, render_comment


def _comment_block(node: SchemaNode) -> str | None:
    return render_comment(node.comment) if has_comment(node) else None


def _declared_name(node: SchemaNode, role: str) -> str:
    if not has_standalone_name(node):
        raise MissingStandaloneNameError(node, role)
    return to_safe_string(node.standalone_name)


def render_standalone_enum(node: EnumNode, options: GeneratorOptions) -> str:
    """
    Render an ``export enum`` (or ``export const enum``) declaration.

    Args:
        node: The enum node; must carry a standalone name
        options: Generator options

    Returns:
        The declaration, without a trailing line break
    """
    members = [f"{param.key_name} = {render_type(param.ast, options)}" for param in node.params]
    return get_template("enum").render(
        comment=_comment_block(node),
        is_const=options.enable_const_enums,
        name=_declared_name(node, "Enum"),
        body=",\n".join(members),
    )


def render_standalone_interface(node: InterfaceNode, options: GeneratorOptions) -> str:
    """
    Render an ``export interface`` declaration, with its ``extends`` clause.

    Args:
        node: The interface node; must carry a standalone name
        options: Generator options

    Returns:
        The declaration, without a trailing line break
    """
    super_types = [_declared_name(super_type, "Super-type") for super_type in node.super_types]
    return get_template("interface").render(
        comment=_comment_block(node),
        name=_declared_name(node, "Interface"),
        super_types=super_types,
        body=render_interface_body(node, options),
    )


def render_standalone_type(node: SchemaNode, options: GeneratorOptions) -> str:
    """Render an ``export type Name = ...`` alias for a named node.

    The right-hand side is the node's structure, rendered with its own name
    suppressed so that the alias does not refer to itself.
    """
    name = _declared_name(node, "Type alias")
    return get_template("type").render(
        comment=_comment_block(node),
        name=name,
        type_expression=render_type(with_standalone_name(node, None), options),
    )
