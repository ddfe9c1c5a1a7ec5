from enum import Enum
from typing import Optional

class NodeKind(str, Enum):
    """
    Closed set of node kinds the compiler knows how to emit.

    Values are the kind strings used in serialized graphs. Graph nodes keep
    their kind as a plain string so unknown kinds survive loading; the
    compiler maps them through `NodeKind.parse` and skips what it cannot
    resolve.
    """
    # --- Input ---
    VERTEX_POSITION = 'vertex_position'
    VERTEX_NORMAL = 'vertex_normal'
    VERTEX_UV = 'vertex_uv'
    TIME = 'time'
    CAMERA_POSITION = 'camera_position'

    # --- Math ---
    ADD = 'add'
    SUBTRACT = 'subtract'
    MULTIPLY = 'multiply'
    DIVIDE = 'divide'
    POWER = 'power'
    SQRT = 'sqrt'
    ABS = 'abs'
    CLAMP = 'clamp'
    LERP = 'lerp'
    STEP = 'step'
    SMOOTHSTEP = 'smoothstep'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    FRACT = 'fract'
    FLOOR = 'floor'
    MIN = 'min'
    MAX = 'max'

    # --- Texture ---
    TEXTURE_SAMPLE = 'texture_sample'
    NOISE_TEXTURE = 'noise_texture'
    VORONOI_TEXTURE = 'voronoi_texture'

    # --- Color ---
    COLOR_CONSTANT = 'color_constant'
    HSV_TO_RGB = 'hsv_to_rgb'
    RGB_TO_HSV = 'rgb_to_hsv'
    COLOR_RAMP = 'color_ramp'

    # --- Vector ---
    SPLIT_VEC3 = 'split_vec3'
    COMBINE_VEC3 = 'combine_vec3'
    NORMALIZE = 'normalize'
    DOT_PRODUCT = 'dot_product'
    CROSS_PRODUCT = 'cross_product'
    LENGTH = 'length'

    # --- Lighting ---
    FRESNEL = 'fresnel'
    NORMAL_MAP = 'normal_map'

    # --- Output ---
    PBR_OUTPUT = 'pbr_output'

    @classmethod
    def parse(cls, kind: str) -> Optional['NodeKind']:
        """Return the NodeKind for a kind string, or None if unknown."""
        try:
            return cls(kind)
        except ValueError:
            return None

    def __str__(self):
        return self.value
