"""
Dedup state threaded through the declaration passes.

Each pass (named types, named interfaces, enums) records the nodes it has
visited in its own ProcessedSet. A node counts as visited when the node
itself was seen, or when another node declaring the same standalone name
was seen: two distinct nodes resolving to one declared name must not
produce two conflicting declarations.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schema_ast.nodes import SchemaNode


class ProcessedSet:
    """Nodes already visited by one declaration pass."""

    def __init__(self):
        # id(node) -> node; holding the node keeps its id from being reused
        self._nodes: dict[int, SchemaNode] = {}
        self._names: set[str] = set()

    def contains(self, node: SchemaNode) -> bool:
        if id(node) in self._nodes:
            return True
        return node.standalone_name is not None and node.standalone_name in self._names

    def add(self, node: SchemaNode) -> None:
        self._nodes[id(node)] = node
        if node.standalone_name is not None:
            self._names.add(node.standalone_name)

    def clear(self) -> None:
        self._nodes.clear()
        self._names.clear()

    @property
    def names(self) -> frozenset[str]:
        """Standalone names of the visited nodes."""
        return frozenset(self._names)

    def __contains__(self, node: SchemaNode) -> bool:
        return self.contains(node)

    def __len__(self) -> int:
        return len(self._nodes)


@dataclass
class GenerationContext:
    """Memo sets of the three declaration passes.

    A fresh context is used for every generation run unless the caller
    passes one in. Reusing a context across runs (e.g. one per output
    directory in a batch) keeps a name declared in an earlier file from
    being declared again; call reset() between unrelated runs.

    Not thread-safe: a context must not be shared by concurrent runs.
    """

    named_types: ProcessedSet = field(default_factory=ProcessedSet)
    named_interfaces: ProcessedSet = field(default_factory=ProcessedSet)
    enums: ProcessedSet = field(default_factory=ProcessedSet)

    def reset(self) -> None:
        """Forget every node seen so far."""
        self.named_types.clear()
        self.named_interfaces.clear()
        self.enums.clear()
