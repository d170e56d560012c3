"""
Pipeline - resolved schema AST to TypeScript declarations.

1. Schema AST: resolved node graph handed over by the schema parser
2. Declaration passes: collect named types, interfaces and enums, each once
3. Renderer and formatters: inline type expressions and Jinja2-rendered
   standalone declarations
"""

from __future__ import annotations

from .config import DEFAULT_OPTIONS, GeneratorOptions
from .errors import GenerationError, MissingStandaloneNameError, UnsupportedNodeError
from .generator import GenerationContext, TypeScriptGenerator, generate, reset_processed

__all__ = [
    "DEFAULT_OPTIONS",
    "GeneratorOptions",
    "GenerationError",
    "MissingStandaloneNameError",
    "UnsupportedNodeError",
    "GenerationContext",
    "TypeScriptGenerator",
    "generate",
    "reset_processed",
]
