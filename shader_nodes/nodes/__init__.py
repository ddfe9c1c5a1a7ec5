# Node Type Catalog
# Port declarations for every node kind, grouped by category

from typing import Dict, Iterable, Iterator, List, Optional

from ..ir.kinds import NodeKind
from ..ir.types import DataType, PORT_COMPATIBILITY, is_compatible
from .base import NodeTypeDefinition, Port
from . import input, math, textures, color, vector, lighting, output


# Category order is the palette order
CATEGORIES = [
    ('input', 'Input'),
    ('math', 'Math'),
    ('texture', 'Texture'),
    ('color', 'Color'),
    ('vector', 'Vector'),
    ('lighting', 'Lighting'),
    ('output', 'Output'),
]

_category_modules = [input, math, textures, color, vector, lighting, output]


class NodeCatalog:
    """
    Read-only lookup of node type definitions by kind string.

    The compiler only ever calls `lookup`; any object offering that method
    can stand in for a catalog.
    """

    def __init__(self, definitions: Iterable[NodeTypeDefinition]):
        self._definitions: Dict[str, NodeTypeDefinition] = {}
        for definition in definitions:
            self._definitions[definition.kind.value] = definition

    def lookup(self, kind: str) -> Optional[NodeTypeDefinition]:
        """Get the definition for a kind, or None if the kind is unknown."""
        return self._definitions.get(str(kind))

    def kinds(self) -> List[str]:
        return list(self._definitions)

    def by_category(self, category: str) -> List[NodeTypeDefinition]:
        return [d for d in self._definitions.values() if d.category == category]

    def __contains__(self, kind) -> bool:
        return str(kind) in self._definitions

    def __iter__(self) -> Iterator[NodeTypeDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


NODE_DEFINITIONS: List[NodeTypeDefinition] = [
    definition for module in _category_modules for definition in module.DEFINITIONS
]

DEFAULT_CATALOG = NodeCatalog(NODE_DEFINITIONS)


def lookup(kind: str) -> Optional[NodeTypeDefinition]:
    """Look up a kind in the default catalog."""
    return DEFAULT_CATALOG.lookup(kind)


__all__ = [
    'CATEGORIES', 'NodeCatalog', 'NODE_DEFINITIONS', 'DEFAULT_CATALOG', 'lookup',
    'NodeTypeDefinition', 'Port', 'DataType', 'NodeKind',
    'PORT_COMPATIBILITY', 'is_compatible',
]
