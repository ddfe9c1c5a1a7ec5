from collections import Counter, deque
from typing import Dict, List

from ..errors import CyclicDependencyError
from ..ir.graph import Graph, Node

def get_topological_sort(graph: Graph) -> List[Node]:
    """
    Returns the graph's nodes in dependency order (producers first).

    Kahn's algorithm; the queue is seeded in node-array order so the result,
    and therefore the generated code, is deterministic for a given graph
    encoding. Edges naming a node that is not in the graph are ignored.

    Raises:
        CyclicDependencyError: if fewer nodes can be ordered than the graph
            holds. A repeated node id counts once in the order, so a graph
            with duplicate ids fails the same way a cycle does.
    """
    node_map = graph.node_map()

    in_degree: Dict[str, int] = {node_id: 0 for node_id in node_map}
    adjacency: Dict[str, List[str]] = {node_id: [] for node_id in node_map}

    for edge in graph.edges:
        if edge.source_node_id not in node_map or edge.target_node_id not in node_map:
            continue
        adjacency[edge.source_node_id].append(edge.target_node_id)
        in_degree[edge.target_node_id] += 1

    queue = deque(node_id for node_id, degree in in_degree.items() if degree == 0)

    order: List[str] = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbor in adjacency[current]:
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)

    if len(order) < len(graph.nodes):
        visited = set(order)
        remaining = [node_id for node_id in node_map if node_id not in visited]
        if not remaining:
            counts = Counter(node.id for node in graph.nodes)
            remaining = [node_id for node_id in node_map if counts[node_id] > 1]
        raise CyclicDependencyError(node_ids=remaining)

    return [node_map[node_id] for node_id in order]
