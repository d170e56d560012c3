"""
Declaration generator.

Turns a resolved schema AST into TypeScript declarations in three passes
(type aliases, interfaces, enums), sharing an inline type renderer.
"""

from __future__ import annotations

from .context import GenerationContext, ProcessedSet
from .declarations import declare_enums, declare_named_interfaces, declare_named_types
from .formatters import render_standalone_enum, render_standalone_interface, render_standalone_type
from .generator import TypeScriptGenerator, generate, reset_processed
from .renderer import escape_key_name, render_interface_body, render_set_operation, render_type
from .templates import render_comment

__all__ = [
    "GenerationContext",
    "ProcessedSet",
    "TypeScriptGenerator",
    "generate",
    "reset_processed",
    "declare_named_types",
    "declare_named_interfaces",
    "declare_enums",
    "render_type",
    "render_set_operation",
    "render_interface_body",
    "escape_key_name",
    "render_comment",
    "render_standalone_enum",
    "render_standalone_interface",
    "render_standalone_type",
]
