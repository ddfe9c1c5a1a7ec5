from typing import List

from ..ir.graph import Graph
from ..nodes import DEFAULT_CATALOG
from .analysis import get_topological_sort


def ascii_plan(graph: Graph, catalog=None) -> str:
    """
    Text rendering of the evaluation order, one node per line with its
    outgoing connections underneath.

    Raises:
        CyclicDependencyError: if the graph cannot be ordered
    """
    catalog = catalog if catalog is not None else DEFAULT_CATALOG
    order = get_topological_sort(graph)

    lines: List[str] = [f"# {graph.name} (evaluation order)"]
    for i, node in enumerate(order, 1):
        definition = catalog.lookup(node.kind)
        label = definition.label if definition is not None else "unknown"
        lines.append(f"{i:02d}. {node.id} [{node.kind}: {label}]")
        for e in graph.outgoing_edges(node.id):
            lines.append(f"    └─▶ {e.target_node_id}  ({e.source_port_id}->{e.target_port_id})")
    return "\n".join(lines)


__all__ = ['ascii_plan']
