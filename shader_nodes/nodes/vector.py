from ..ir.kinds import NodeKind
from ..ir.types import DataType
from .base import NodeTypeDefinition, float_in, vec_in, out

CATEGORY = 'vector'

DEFINITIONS = [
    NodeTypeDefinition(
        NodeKind.SPLIT_VEC3, CATEGORY, 'Split Vec3',
        'Split a Vec3 into components',
        inputs=(vec_in('vector', 'Vector'),),
        outputs=(out('x', 'X'), out('y', 'Y'), out('z', 'Z')),
    ),
    NodeTypeDefinition(
        NodeKind.COMBINE_VEC3, CATEGORY, 'Combine Vec3',
        'Combine components into Vec3',
        inputs=(float_in('x', 'X', 0), float_in('y', 'Y', 0), float_in('z', 'Z', 0)),
        outputs=(out('vector', 'Vector', DataType.VEC3),),
    ),
    NodeTypeDefinition(
        NodeKind.NORMALIZE, CATEGORY, 'Normalize',
        'Normalize a vector',
        inputs=(vec_in('vector', 'Vector'),),
        outputs=(out('result', 'Result', DataType.VEC3),),
    ),
    NodeTypeDefinition(
        NodeKind.DOT_PRODUCT, CATEGORY, 'Dot Product',
        'Dot product of two vectors',
        inputs=(vec_in('a', 'A'), vec_in('b', 'B')),
        outputs=(out('result', 'Result'),),
    ),
    NodeTypeDefinition(
        NodeKind.CROSS_PRODUCT, CATEGORY, 'Cross Product',
        'Cross product of two vectors',
        inputs=(vec_in('a', 'A'), vec_in('b', 'B')),
        outputs=(out('result', 'Result', DataType.VEC3),),
    ),
    NodeTypeDefinition(
        NodeKind.LENGTH, CATEGORY, 'Length',
        'Length of a vector',
        inputs=(vec_in('vector', 'Vector'),),
        outputs=(out('result', 'Result'),),
    ),
]
