"""
Configuration for the declaration generator.

Option names follow the Python convention; the camelCase names used by the
JSON Schema to TypeScript tooling are accepted by from_dict() as aliases.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BANNER_COMMENT = """/* tslint:disable */
/**
 * This file was automatically generated by json_schema_to_ts.
 * DO NOT MODIFY IT BY HAND. Instead, modify the source JSON Schema file,
 * and run json_schema_to_ts to regenerate this file.
 */"""

# camelCase option name -> field name
_OPTION_ALIASES = {
    "bannerComment": "banner_comment",
    "enableConstEnums": "enable_const_enums",
    "declareExternallyReferenced": "declare_externally_referenced",
}


@dataclass
class GeneratorOptions:
    """Configuration options for declaration generation."""

    # Text prepended verbatim to the output, followed by a blank line (empty to omit)
    banner_comment: str = DEFAULT_BANNER_COMMENT

    # Declare enums as `export const enum` instead of `export enum`
    enable_const_enums: bool = True

    # Declare named interfaces reachable from the root, not only the root itself
    declare_externally_referenced: bool = True

    @staticmethod
    def from_dict(d: dict) -> GeneratorOptions:
        """Create options from a dictionary, ignoring unknown keys."""
        options = GeneratorOptions()
        for k, v in d.items():
            k = _OPTION_ALIASES.get(k, k)
            if hasattr(options, k):
                setattr(options, k, v)
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {
            "banner_comment": self.banner_comment,
            "enable_const_enums": self.enable_const_enums,
            "declare_externally_referenced": self.declare_externally_referenced,
        }


DEFAULT_OPTIONS = GeneratorOptions()
