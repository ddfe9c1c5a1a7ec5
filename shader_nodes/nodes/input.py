from ..ir.kinds import NodeKind
from ..ir.types import DataType
from .base import NodeTypeDefinition, out

CATEGORY = 'input'

DEFINITIONS = [
    NodeTypeDefinition(
        NodeKind.VERTEX_POSITION, CATEGORY, 'Vertex Position',
        'World-space vertex position',
        outputs=(out('position', 'Position', DataType.VEC3),),
    ),
    NodeTypeDefinition(
        NodeKind.VERTEX_NORMAL, CATEGORY, 'Vertex Normal',
        'World-space vertex normal',
        outputs=(out('normal', 'Normal', DataType.VEC3),),
    ),
    NodeTypeDefinition(
        NodeKind.VERTEX_UV, CATEGORY, 'Vertex UV',
        'UV texture coordinates',
        outputs=(out('uv', 'UV', DataType.VEC2),),
    ),
    NodeTypeDefinition(
        NodeKind.TIME, CATEGORY, 'Time',
        'Elapsed time in seconds',
        outputs=(out('time', 'Time'),),
    ),
    NodeTypeDefinition(
        NodeKind.CAMERA_POSITION, CATEGORY, 'Camera Position',
        'World-space camera position',
        outputs=(out('position', 'Position', DataType.VEC3),),
    ),
]
