# Arithmetic Operation Emitters
# Handles: ADD, SUBTRACT, MULTIPLY, DIVIDE


def emit_binary_op(symbol, node, ctx):
    var = ctx.new_var()
    ctx.emit(f"let {var} = {ctx.param('a')} {symbol} {ctx.param('b')};")
    ctx.bind(ctx.output_id, var)


def emit_add(node, ctx):
    emit_binary_op('+', node, ctx)


def emit_subtract(node, ctx):
    emit_binary_op('-', node, ctx)


def emit_multiply(node, ctx):
    emit_binary_op('*', node, ctx)


def emit_divide(node, ctx):
    emit_binary_op('/', node, ctx)
