from typing import Dict, List

from ..errors import NoOutputNodeError
from ..ir.graph import Graph, Node
from ..ir.kinds import NodeKind
from ..nodes import DEFAULT_CATALOG
from ..nodes.output import PBR_OUTPUT
from ..planner.analysis import get_topological_sort
from .emitters import get_emitter
from .emitters.const import default_value
from .output import generate_output_assignments
from .shader_context import CompileContext, ShaderContext
from .template import assemble_shader


class ShaderGenerator:
    """
    Generates a WGSL fragment shader from a shader Graph.

    Nodes are visited in dependency order. Kinds without a catalog entry or
    without an emitter contribute nothing; inputs that cannot be resolved
    fall back to their port defaults. Only a missing output node or a cycle
    are errors.
    """
    def __init__(self, graph: Graph, catalog=None):
        self.graph = graph
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    def generate(self) -> str:
        output_node = self.graph.find_output_node()
        if output_node is None:
            raise NoOutputNodeError()

        order = get_topological_sort(self.graph)

        ctx = CompileContext()
        edge_map = self.graph.input_edge_map()
        for node in order:
            if node.kind == NodeKind.PBR_OUTPUT.value:
                continue
            self._emit_node(node, edge_map, ctx)

        output_def = self.catalog.lookup(NodeKind.PBR_OUTPUT.value) or PBR_OUTPUT
        assignments = generate_output_assignments(output_node, output_def, self.graph, ctx)

        return assemble_shader(ctx.statements, assignments)

    def _resolve_inputs(self, node: Node, definition, edge_map, ctx: CompileContext) -> Dict[str, str]:
        """Input port id -> WGSL expression (upstream variable or default)."""
        inputs = {}
        for port in definition.inputs:
            ref = None
            edge = edge_map.get((node.id, port.id))
            if edge is not None:
                ref = ctx.lookup(edge.source_node_id, edge.source_port_id)
            inputs[port.id] = ref if ref is not None else default_value(port)
        return inputs

    def _emit_node(self, node: Node, edge_map, ctx: CompileContext) -> None:
        """Emit WGSL for one node using the modular emitter registry."""
        definition = self.catalog.lookup(node.kind)
        if definition is None:
            return

        emitter = get_emitter(node.kind)
        if emitter is None:
            return

        inputs = self._resolve_inputs(node, definition, edge_map, ctx)
        emitter(node, ShaderContext(ctx, node, definition, inputs))


__all__ = ['ShaderGenerator']
