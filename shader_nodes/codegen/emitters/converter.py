# Converter Operation Emitters
# Handles: SPLIT_VEC3, COMBINE_VEC3, HSV_TO_RGB, RGB_TO_HSV, COLOR_RAMP

from ..shader_lib import HSV_TO_RGB, RGB_TO_HSV, COLOR_RAMP


def emit_split_vec3(node, ctx):
    """Emit split - one statement per component (x, y, z)."""
    vec = ctx.param('vector')
    for component in ('x', 'y', 'z'):
        var = ctx.new_var()
        ctx.emit(f"let {var} = {vec}.{component};")
        ctx.bind(component, var)


def emit_combine_vec3(node, ctx):
    """Emit combine - constructs vec3 from x, y, z."""
    var = ctx.new_var()
    x = ctx.param('x')
    y = ctx.param('y')
    z = ctx.param('z')
    ctx.emit(f"let {var} = vec3<f32>({x}, {y}, {z});")
    ctx.bind('vector', var)


def emit_hsv_to_rgb(node, ctx):
    names = HSV_TO_RGB.expand(ctx, value=ctx.param('hsv'))
    ctx.bind('rgb', names['rgb'])


def emit_rgb_to_hsv(node, ctx):
    names = RGB_TO_HSV.expand(ctx, value=ctx.param('rgb'))
    ctx.bind('hsv', names['hsv'])


def emit_color_ramp(node, ctx):
    names = COLOR_RAMP.expand(
        ctx,
        t=ctx.param('t'),
        color_a=ctx.param('color_a'),
        color_b=ctx.param('color_b'),
    )
    ctx.bind('color', names['color'])
