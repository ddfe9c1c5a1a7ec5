from ..ir.kinds import NodeKind
from ..ir.types import DataType
from .base import NodeTypeDefinition, float_in, vec_in

CATEGORY = 'output'

# Input order is the order assignments appear in the generated shader
PBR_OUTPUT = NodeTypeDefinition(
    NodeKind.PBR_OUTPUT, CATEGORY, 'PBR Output',
    'Material output node',
    inputs=(
        vec_in('base_color', 'Base Color', DataType.VEC4, (0.5, 0.5, 0.5, 1)),
        float_in('metallic', 'Metallic', 0),
        float_in('roughness', 'Roughness', 0.5),
        vec_in('normal', 'Normal'),
        vec_in('emissive', 'Emissive', DataType.VEC3, (0, 0, 0)),
        float_in('alpha', 'Alpha', 1),
    ),
)

DEFINITIONS = [PBR_OUTPUT]
