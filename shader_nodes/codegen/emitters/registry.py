# Emitter Registry
# Maps NodeKind -> emitter function

from typing import Callable, Dict, Optional

from ...ir.kinds import NodeKind
from ...ir.graph import Node
from ..shader_context import ShaderContext

# Emitter signature: (node: Node, ctx: ShaderContext) -> None
# Emitters append statements through ctx.emit and record outputs via ctx.bind
EmitterType = Callable[[Node, ShaderContext], None]

from .arithmetic import emit_add, emit_subtract, emit_multiply, emit_divide
from .math_funcs import emit_unary, emit_power, emit_minmax, emit_clamp, emit_lerp
from .math_funcs import emit_step, emit_smoothstep
from .vector import emit_normalize, emit_dot, emit_cross, emit_length
from .types import emit_builtin, emit_color_constant
from .converter import emit_split_vec3, emit_combine_vec3
from .converter import emit_hsv_to_rgb, emit_rgb_to_hsv, emit_color_ramp
from .textures import emit_noise, emit_voronoi
from .lighting import emit_fresnel
from .placeholders import emit_texture_sample, emit_normal_map


# Registry mapping NodeKind to emitter function.
# PBR_OUTPUT has no entry: the generator assembles it separately.
EMITTER_REGISTRY: Dict[NodeKind, EmitterType] = {
    # Inputs (no statements, bound to builtins)
    NodeKind.VERTEX_POSITION: emit_builtin,
    NodeKind.VERTEX_NORMAL: emit_builtin,
    NodeKind.VERTEX_UV: emit_builtin,
    NodeKind.TIME: emit_builtin,
    NodeKind.CAMERA_POSITION: emit_builtin,

    # Arithmetic
    NodeKind.ADD: emit_add,
    NodeKind.SUBTRACT: emit_subtract,
    NodeKind.MULTIPLY: emit_multiply,
    NodeKind.DIVIDE: emit_divide,

    # Math functions
    NodeKind.POWER: emit_power,
    NodeKind.SQRT: lambda node, ctx: emit_unary('sqrt', node, ctx),
    NodeKind.ABS: lambda node, ctx: emit_unary('abs', node, ctx),
    NodeKind.CLAMP: emit_clamp,
    NodeKind.LERP: emit_lerp,
    NodeKind.STEP: emit_step,
    NodeKind.SMOOTHSTEP: emit_smoothstep,

    # Trig / rounding
    NodeKind.SIN: lambda node, ctx: emit_unary('sin', node, ctx),
    NodeKind.COS: lambda node, ctx: emit_unary('cos', node, ctx),
    NodeKind.TAN: lambda node, ctx: emit_unary('tan', node, ctx),
    NodeKind.FRACT: lambda node, ctx: emit_unary('fract', node, ctx),
    NodeKind.FLOOR: lambda node, ctx: emit_unary('floor', node, ctx),

    # Min/Max
    NodeKind.MIN: lambda node, ctx: emit_minmax('min', node, ctx),
    NodeKind.MAX: lambda node, ctx: emit_minmax('max', node, ctx),

    # Textures
    NodeKind.TEXTURE_SAMPLE: emit_texture_sample,
    NodeKind.NOISE_TEXTURE: emit_noise,
    NodeKind.VORONOI_TEXTURE: emit_voronoi,

    # Color
    NodeKind.COLOR_CONSTANT: emit_color_constant,
    NodeKind.HSV_TO_RGB: emit_hsv_to_rgb,
    NodeKind.RGB_TO_HSV: emit_rgb_to_hsv,
    NodeKind.COLOR_RAMP: emit_color_ramp,

    # Vector
    NodeKind.SPLIT_VEC3: emit_split_vec3,
    NodeKind.COMBINE_VEC3: emit_combine_vec3,
    NodeKind.NORMALIZE: emit_normalize,
    NodeKind.DOT_PRODUCT: emit_dot,
    NodeKind.CROSS_PRODUCT: emit_cross,
    NodeKind.LENGTH: emit_length,

    # Lighting
    NodeKind.FRESNEL: emit_fresnel,
    NodeKind.NORMAL_MAP: emit_normal_map,
}


def get_emitter(kind: str) -> Optional[EmitterType]:
    """Get emitter function for a kind string, or None if not found."""
    node_kind = NodeKind.parse(kind)
    if node_kind is None:
        return None
    return EMITTER_REGISTRY.get(node_kind)


__all__ = ['EMITTER_REGISTRY', 'EmitterType', 'get_emitter']
