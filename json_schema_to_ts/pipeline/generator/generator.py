"""
Declaration generator entry points.

Runs the three declaration passes over a resolved schema AST and assembles
the output file text:

1. Banner comment
2. ``export type`` declarations
3. ``export interface`` declarations
4. ``export enum`` declarations

Empty sections are omitted, sections are separated by a blank line and the
text ends with exactly one line break.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_OPTIONS, GeneratorOptions
from ..errors import MissingStandaloneNameError, UnsupportedNodeError
from ..schema_ast.nodes import SchemaNode, has_standalone_name
from .context import GenerationContext
from .declarations import declare_enums, declare_named_interfaces, declare_named_types

logger = logging.getLogger(__name__)


def generate(
    ast: SchemaNode,
    options: GeneratorOptions | None = None,
    context: GenerationContext | None = None,
) -> str:
    """
    Generate TypeScript declarations for a resolved schema AST.

    Args:
        ast: Root node; must carry a standalone name
        options: Generator options (defaults to DEFAULT_OPTIONS)
        context: Dedup state to use and update. A fresh context is used when
            omitted; pass the same context to several calls to keep names
            declared by earlier calls from being declared again.

    Returns:
        The declarations text, ending with a single line break
    """
    if options is None:
        options = DEFAULT_OPTIONS
    if context is None:
        context = GenerationContext()
    if not isinstance(ast, SchemaNode):
        raise UnsupportedNodeError(ast)
    if not has_standalone_name(ast):
        raise MissingStandaloneNameError(ast, "Root node")

    logger.debug("Generating declarations for %s", ast.standalone_name)

    named_types = declare_named_types(ast, options, context.named_types)
    named_interfaces = declare_named_interfaces(ast, options, ast.standalone_name, context.named_interfaces)
    enums = declare_enums(ast, options, context.enums)

    # The banner is kept verbatim; declaration sections lose their trailing line breaks
    declarations = [section.rstrip("\n") for section in (named_types, named_interfaces, enums)]
    sections = [options.banner_comment or ""] + declarations
    return "\n\n".join(section for section in sections if section) + "\n"


def reset_processed(context: GenerationContext) -> None:
    """Clear the dedup state of a context between unrelated runs."""
    context.reset()


class TypeScriptGenerator:
    """Generates declarations for several schemas, declaring each name once.

    Dedup state is kept across calls to generate(), so a declaration emitted
    for one schema is not repeated for the next. Call reset() before
    generating for an unrelated set of schemas.
    """

    def __init__(self, options: GeneratorOptions | None = None):
        """
        Initialize the generator.

        Args:
            options: Generator options (defaults to DEFAULT_OPTIONS)
        """
        self.options = options if options is not None else DEFAULT_OPTIONS
        self.context = GenerationContext()

    def generate(self, ast: SchemaNode) -> str:
        """Generate declarations for one schema, skipping names already declared."""
        return generate(ast, self.options, self.context)

    def reset(self) -> None:
        """Forget every declaration emitted so far."""
        reset_processed(self.context)
