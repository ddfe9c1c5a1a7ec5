from ..ir.kinds import NodeKind
from ..ir.types import DataType
from .base import NodeTypeDefinition, float_in, vec_in, out

CATEGORY = 'color'

DEFINITIONS = [
    NodeTypeDefinition(
        NodeKind.COLOR_CONSTANT, CATEGORY, 'Color',
        'Constant color value',
        outputs=(out('color', 'Color', DataType.VEC4),),
    ),
    NodeTypeDefinition(
        NodeKind.HSV_TO_RGB, CATEGORY, 'HSV to RGB',
        'Convert HSV to RGB',
        inputs=(vec_in('hsv', 'HSV'),),
        outputs=(out('rgb', 'RGB', DataType.VEC3),),
    ),
    NodeTypeDefinition(
        NodeKind.RGB_TO_HSV, CATEGORY, 'RGB to HSV',
        'Convert RGB to HSV',
        inputs=(vec_in('rgb', 'RGB'),),
        outputs=(out('hsv', 'HSV', DataType.VEC3),),
    ),
    NodeTypeDefinition(
        NodeKind.COLOR_RAMP, CATEGORY, 'Color Ramp',
        'Gradient between two colors',
        inputs=(
            float_in('t', 'Factor', 0.5),
            vec_in('color_a', 'Color A', DataType.VEC4),
            vec_in('color_b', 'Color B', DataType.VEC4),
        ),
        outputs=(out('color', 'Color', DataType.VEC4),),
    ),
]
