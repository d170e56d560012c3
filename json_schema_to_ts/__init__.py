"""JSON Schema to TypeScript

A Python package for generating TypeScript declarations from resolved
JSON Schema ASTs. Named types, interfaces and enums are each declared
exactly once, even in shared or cyclic schemas.
"""

__version__ = "1.0.1"

from .pipeline import (
    DEFAULT_OPTIONS,
    GenerationContext,
    GenerationError,
    GeneratorOptions,
    MissingStandaloneNameError,
    TypeScriptGenerator,
    UnsupportedNodeError,
    generate,
    reset_processed,
)

__all__ = [
    "generate",
    "reset_processed",
    "TypeScriptGenerator",
    "GenerationContext",
    "GeneratorOptions",
    "DEFAULT_OPTIONS",
    "GenerationError",
    "MissingStandaloneNameError",
    "UnsupportedNodeError",
]
