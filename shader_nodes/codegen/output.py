# PBR Output assembly
# Turns the output node's inputs into assignments on `pbr_input`.

from typing import Dict, List

from ..ir.graph import Graph, Node
from .emitters.const import default_value
from .shader_context import CompileContext

# Input port -> assignment template
OUTPUT_FIELD_MAP: Dict[str, str] = {
    'base_color': "pbr_input.material.base_color = {value};",
    'metallic': "pbr_input.material.metallic = {value};",
    'roughness': "pbr_input.material.perceptual_roughness = {value};",
    'normal': "pbr_input.N = {value};",
    'emissive': "pbr_input.material.emissive = vec4<f32>({value}, 1.0);",
    'alpha': "pbr_input.material.base_color.a = {value};",
}

# Written only when something is actually connected
CONNECTED_ONLY = {'normal'}


def generate_output_assignments(output_node: Node, definition, graph: Graph,
                                compile_ctx: CompileContext) -> List[str]:
    """
    One assignment per output input, in the definition's input order.

    An input whose edge points at an output nobody produced falls back to
    the port default, same as an unconnected one.
    """
    edge_map = graph.input_edge_map()
    assignments = []
    for port in definition.inputs:
        template = OUTPUT_FIELD_MAP.get(port.id)
        if template is None:
            continue

        edge = edge_map.get((output_node.id, port.id))
        if edge is None and port.id in CONNECTED_ONLY:
            continue

        value = None
        if edge is not None:
            value = compile_ctx.lookup(edge.source_node_id, edge.source_port_id)
        if value is None:
            value = default_value(port)

        assignments.append(template.format(value=value))
    return assignments
