import logging
from collections import Counter
from typing import List, Tuple

from ..errors import CyclicDependencyError
from ..ir.graph import Graph
from ..ir.kinds import NodeKind
from ..ir.types import is_compatible
from ..nodes import DEFAULT_CATALOG
from .analysis import get_topological_sort

logger = logging.getLogger(__name__)


def lint_graph(graph: Graph, catalog=None) -> Tuple[bool, List[str]]:
    """
    Check a graph for problems the compiler silently tolerates.

    Returns (ok, messages). Messages are prefixed "OK:", "ERR:" or "WARN:";
    only ERR messages clear `ok`. Warnings describe graphs that compile but
    probably not the way the author meant (ignored duplicate outputs or
    edges, unknown kinds).
    """
    catalog = catalog if catalog is not None else DEFAULT_CATALOG
    messages: List[str] = []
    ok = True

    # 1) Unique node ids
    counts = Counter(n.id for n in graph.nodes)
    duplicates = sorted(node_id for node_id, count in counts.items() if count > 1)
    if duplicates:
        ok = False
        for node_id in duplicates:
            messages.append(f"ERR: Duplicate node ID '{node_id}'; the graph will not compile.")
    else:
        messages.append("OK: Node IDs are unique.")

    # 2) Exactly one output node
    outputs = [n for n in graph.nodes if n.kind == NodeKind.PBR_OUTPUT.value]
    if not outputs:
        ok = False
        messages.append("ERR: No PBR Output node.")
    elif len(outputs) > 1:
        ignored = ', '.join(n.id for n in outputs[1:])
        messages.append(f"WARN: {len(outputs)} PBR Output nodes; only '{outputs[0].id}' is used (ignored: {ignored}).")
    else:
        messages.append("OK: Graph has one PBR Output node.")

    # 3) Known kinds
    unknown = [n for n in graph.nodes if catalog.lookup(n.kind) is None]
    for node in unknown:
        messages.append(f"WARN: Node '{node.id}' has unknown kind '{node.kind}' and emits nothing.")
    if not unknown:
        messages.append("OK: All node kinds are known.")

    # 4) Edges refer to existing nodes and declared ports of matching types
    node_map = graph.node_map()
    edges_ok = True
    for e in graph.edges:
        label = f"{e.source_node_id}.{e.source_port_id}->{e.target_node_id}.{e.target_port_id}"
        source = node_map.get(e.source_node_id)
        target = node_map.get(e.target_node_id)
        if source is None or target is None:
            edges_ok = False
            messages.append(f"ERR: Edge {label} references missing node(s).")
            continue

        source_def = catalog.lookup(source.kind)
        target_def = catalog.lookup(target.kind)
        if source_def is None or target_def is None:
            continue

        out_port = source_def.get_output(e.source_port_id)
        in_port = target_def.get_input(e.target_port_id)
        if out_port is None:
            edges_ok = False
            messages.append(f"ERR: Edge {label}: '{e.source_port_id}' is not an output of {source.kind}.")
        if in_port is None:
            edges_ok = False
            messages.append(f"ERR: Edge {label}: '{e.target_port_id}' is not an input of {target.kind}.")
        if out_port is not None and in_port is not None:
            if not is_compatible(out_port.data_type, in_port.data_type):
                edges_ok = False
                messages.append(
                    f"ERR: Edge {label} connects {out_port.data_type.value} to {in_port.data_type.value}.")
    if edges_ok:
        messages.append("OK: All edges connect declared, compatible ports.")
    ok = ok and edges_ok

    # 5) One edge per input
    feeds = Counter(e.target_key for e in graph.edges)
    crowded = [key for key, count in feeds.items() if count > 1]
    for node_id, port_id in crowded:
        messages.append(f"WARN: Input {node_id}.{port_id} has {feeds[(node_id, port_id)]} edges; only the first is used.")
    if not crowded:
        messages.append("OK: Every input has at most one edge.")

    # 6) Acyclic
    try:
        get_topological_sort(graph)
        messages.append("OK: Graph is acyclic.")
    except CyclicDependencyError as e:
        ok = False
        # Repeated ids also stop the sort; they are reported above
        if not set(e.node_ids) <= set(duplicates):
            messages.append(f"ERR: Cycle detected involving: {', '.join(e.node_ids)}.")

    logger.debug("Linted graph '%s': ok=%s, %d messages", graph.name, ok, len(messages))
    return ok, messages


__all__ = ['lint_graph']
