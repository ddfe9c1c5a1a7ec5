# Math Function Emitters
# Handles: builtin function calls with a typed result (pow, clamp, mix, sin, ...)


def emit_function_call(func_name, arg_ports, node, ctx):
    """Emit `let var_N: <type> = func(args...);` bound to the first output."""
    var = ctx.new_var()
    args = ', '.join(ctx.param(port) for port in arg_ports)
    ctx.emit(f"let {var}: {ctx.output_type} = {func_name}({args});")
    ctx.bind(ctx.output_id, var)


def emit_unary(func_name, node, ctx):
    """sqrt, abs, sin, cos, tan, fract, floor"""
    emit_function_call(func_name, ('value',), node, ctx)


def emit_power(node, ctx):
    emit_function_call('pow', ('base', 'exponent'), node, ctx)


def emit_minmax(func_name, node, ctx):
    """min, max"""
    emit_function_call(func_name, ('a', 'b'), node, ctx)


def emit_clamp(node, ctx):
    emit_function_call('clamp', ('value', 'min', 'max'), node, ctx)


def emit_lerp(node, ctx):
    emit_function_call('mix', ('a', 'b', 't'), node, ctx)


def emit_step(node, ctx):
    emit_function_call('step', ('edge', 'value'), node, ctx)


def emit_smoothstep(node, ctx):
    emit_function_call('smoothstep', ('edge0', 'edge1', 'value'), node, ctx)
