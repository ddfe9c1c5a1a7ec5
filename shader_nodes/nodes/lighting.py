from ..ir.kinds import NodeKind
from ..ir.types import DataType
from .base import NodeTypeDefinition, Port, float_in, vec_in, out

CATEGORY = 'lighting'

DEFINITIONS = [
    NodeTypeDefinition(
        NodeKind.FRESNEL, CATEGORY, 'Fresnel',
        'Fresnel effect (view-dependent falloff)',
        inputs=(vec_in('normal', 'Normal'), vec_in('view', 'View'), float_in('power', 'Power', 5)),
        outputs=(out('result', 'Result'),),
    ),
    NodeTypeDefinition(
        NodeKind.NORMAL_MAP, CATEGORY, 'Normal Map',
        'Sample and transform normal map',
        inputs=(
            Port('texture', 'Texture', DataType.TEXTURE2D),
            vec_in('uv', 'UV', DataType.VEC2),
            float_in('strength', 'Strength', 1),
        ),
        outputs=(out('normal', 'Normal', DataType.VEC3),),
    ),
]
