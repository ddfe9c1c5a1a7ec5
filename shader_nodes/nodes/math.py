from ..ir.kinds import NodeKind
from .base import NodeTypeDefinition, float_in, RESULT

CATEGORY = 'math'

def _unary(kind, label, description, default=0):
    return NodeTypeDefinition(
        kind, CATEGORY, label, description,
        inputs=(float_in('value', 'Value', default),),
        outputs=(RESULT,),
    )

def _binary(kind, label, description, default=0):
    return NodeTypeDefinition(
        kind, CATEGORY, label, description,
        inputs=(float_in('a', 'A', default), float_in('b', 'B', default)),
        outputs=(RESULT,),
    )

DEFINITIONS = [
    _binary(NodeKind.ADD, 'Add', 'Add two values'),
    _binary(NodeKind.SUBTRACT, 'Subtract', 'Subtract B from A'),
    _binary(NodeKind.MULTIPLY, 'Multiply', 'Multiply two values', default=1),
    _binary(NodeKind.DIVIDE, 'Divide', 'Divide A by B', default=1),
    NodeTypeDefinition(
        NodeKind.POWER, CATEGORY, 'Power', 'Raise A to the power of B',
        inputs=(float_in('base', 'Base', 1), float_in('exponent', 'Exponent', 2)),
        outputs=(RESULT,),
    ),
    _unary(NodeKind.SQRT, 'Square Root', 'Square root of input', default=1),
    _unary(NodeKind.ABS, 'Absolute', 'Absolute value'),
    NodeTypeDefinition(
        NodeKind.CLAMP, CATEGORY, 'Clamp', 'Clamp value between min and max',
        inputs=(float_in('value', 'Value', 0), float_in('min', 'Min', 0), float_in('max', 'Max', 1)),
        outputs=(RESULT,),
    ),
    NodeTypeDefinition(
        NodeKind.LERP, CATEGORY, 'Lerp', 'Linear interpolation between A and B',
        inputs=(float_in('a', 'A', 0), float_in('b', 'B', 1), float_in('t', 'T', 0.5)),
        outputs=(RESULT,),
    ),
    NodeTypeDefinition(
        NodeKind.STEP, CATEGORY, 'Step', 'Returns 0 if value < edge, else 1',
        inputs=(float_in('edge', 'Edge', 0.5), float_in('value', 'Value', 0)),
        outputs=(RESULT,),
    ),
    NodeTypeDefinition(
        NodeKind.SMOOTHSTEP, CATEGORY, 'Smooth Step', 'Smooth Hermite interpolation',
        inputs=(float_in('edge0', 'Edge 0', 0), float_in('edge1', 'Edge 1', 1), float_in('value', 'Value', 0.5)),
        outputs=(RESULT,),
    ),
    _unary(NodeKind.SIN, 'Sin', 'Sine function'),
    _unary(NodeKind.COS, 'Cos', 'Cosine function'),
    _unary(NodeKind.TAN, 'Tan', 'Tangent function'),
    _unary(NodeKind.FRACT, 'Fract', 'Fractional part (x - floor(x))'),
    _unary(NodeKind.FLOOR, 'Floor', 'Floor function'),
    _binary(NodeKind.MIN, 'Minimum', 'Smaller of A and B'),
    _binary(NodeKind.MAX, 'Maximum', 'Larger of A and B'),
]
