# Texture Operation Emitters
# Handles: NOISE_TEXTURE, VORONOI_TEXTURE

from ..shader_lib import VALUE_NOISE, VORONOI_F1
from .placeholders import VORONOI_COLOR_PLACEHOLDER, emit_placeholder


def emit_noise(node, ctx):
    """Emit value noise sampled at uv * scale."""
    names = VALUE_NOISE.expand(ctx, uv=ctx.param('uv'), scale=ctx.param('scale'))
    ctx.bind('value', names['value'])


def emit_voronoi(node, ctx):
    """Emit F1 cell distance; the color channel is still a stub."""
    names = VORONOI_F1.expand(ctx, uv=ctx.param('uv'), scale=ctx.param('scale'))
    ctx.bind('distance', names['dist'])
    emit_placeholder(VORONOI_COLOR_PLACEHOLDER, 'color', ctx)
