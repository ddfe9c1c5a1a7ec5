# Lighting Emitters
# Handles: FRESNEL


def emit_fresnel(node, ctx):
    """pow(1 - max(dot(N, V), 0), power)"""
    facing = ctx.new_var()
    result = ctx.new_var()
    ctx.emit(f"let {facing} = max(dot({ctx.param('normal')}, {ctx.param('view')}), 0.0);")
    ctx.emit(f"let {result} = pow(1.0 - {facing}, {ctx.param('power')});")
    ctx.bind('result', result)
