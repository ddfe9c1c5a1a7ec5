# Vector Operation Emitters
# Handles: NORMALIZE, DOT_PRODUCT, CROSS_PRODUCT, LENGTH

from .math_funcs import emit_function_call


def emit_normalize(node, ctx):
    emit_function_call('normalize', ('vector',), node, ctx)


def emit_dot(node, ctx):
    emit_function_call('dot', ('a', 'b'), node, ctx)


def emit_cross(node, ctx):
    emit_function_call('cross', ('a', 'b'), node, ctx)


def emit_length(node, ctx):
    emit_function_call('length', ('vector',), node, ctx)
