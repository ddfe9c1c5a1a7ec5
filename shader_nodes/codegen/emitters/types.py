# Source and Constant Emitters
# Handles: builtin inputs (position, normal, uv, time, camera) and COLOR_CONSTANT

from ...ir.kinds import NodeKind
from ...ir.params import ColorConstantParams
from .const import format_fixed, vector_literal


# Fragment builtins: kind -> (output port, WGSL expression)
BUILTIN_EXPRESSIONS = {
    NodeKind.VERTEX_POSITION: ('position', 'in.world_position.xyz'),
    NodeKind.VERTEX_NORMAL: ('normal', 'in.world_normal'),
    NodeKind.VERTEX_UV: ('uv', 'in.uv'),
    NodeKind.TIME: ('time', 'globals.time'),
    NodeKind.CAMERA_POSITION: ('position', 'view.world_position.xyz'),
}


def emit_builtin(node, ctx):
    """Bind the output straight to a builtin expression; emits no statement."""
    port_id, expression = BUILTIN_EXPRESSIONS[node.node_kind]
    ctx.bind(port_id, expression)


def emit_color_constant(node, ctx):
    """Emit an RGBA literal with 4-decimal components."""
    params = node.params or ColorConstantParams()
    var = ctx.new_var()
    ctx.emit(f"let {var} = {vector_literal(params.color, fmt=format_fixed)};")
    ctx.bind('color', var)
