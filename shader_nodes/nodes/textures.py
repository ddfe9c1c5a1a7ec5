from ..ir.kinds import NodeKind
from ..ir.types import DataType
from .base import NodeTypeDefinition, Port, float_in, vec_in, out

CATEGORY = 'texture'

DEFINITIONS = [
    NodeTypeDefinition(
        NodeKind.TEXTURE_SAMPLE, CATEGORY, 'Texture Sample',
        'Sample a texture at UV coordinates',
        inputs=(Port('texture', 'Texture', DataType.TEXTURE2D), vec_in('uv', 'UV', DataType.VEC2)),
        outputs=(out('color', 'Color', DataType.VEC4),),
    ),
    NodeTypeDefinition(
        NodeKind.NOISE_TEXTURE, CATEGORY, 'Noise Texture',
        'Procedural value noise',
        inputs=(vec_in('uv', 'UV', DataType.VEC2), float_in('scale', 'Scale', 1)),
        outputs=(out('value', 'Value'),),
    ),
    NodeTypeDefinition(
        NodeKind.VORONOI_TEXTURE, CATEGORY, 'Voronoi Texture',
        'Procedural Voronoi pattern',
        inputs=(vec_in('uv', 'UV', DataType.VEC2), float_in('scale', 'Scale', 5)),
        outputs=(out('distance', 'Distance'), out('color', 'Color', DataType.VEC3)),
    ),
]
