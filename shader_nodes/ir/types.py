from enum import Enum

class DataType(Enum):
    # Scalars
    FLOAT = 'float'

    # Vectors
    VEC2 = 'vec2'
    VEC3 = 'vec3'
    VEC4 = 'vec4'

    # Editor-facing color; compatible with both vec3 and vec4
    COLOR = 'color'

    # Handles that have no value representation in the generated code
    TEXTURE2D = 'texture2d'
    EXEC = 'exec'

    def is_vector(self):
        return self in {DataType.VEC2, DataType.VEC3, DataType.VEC4, DataType.COLOR}

    def component_count(self):
        if self == DataType.VEC2: return 2
        if self == DataType.VEC3: return 3
        if self in {DataType.VEC4, DataType.COLOR}: return 4
        return 1

    def wgsl_type(self) -> str:
        """WGSL spelling of the type, e.g. 'f32' or 'vec3<f32>'."""
        if self.is_vector():
            return f"vec{self.component_count()}<f32>"
        return "f32"

    def __str__(self):
        return self.value


# Type compatibility matrix for port connections (source -> accepted targets)
PORT_COMPATIBILITY = {
    DataType.FLOAT: {DataType.FLOAT},
    DataType.VEC2: {DataType.VEC2},
    DataType.VEC3: {DataType.VEC3, DataType.COLOR},
    DataType.VEC4: {DataType.VEC4, DataType.COLOR},
    DataType.COLOR: {DataType.VEC3, DataType.VEC4, DataType.COLOR},
    DataType.TEXTURE2D: {DataType.TEXTURE2D},
    DataType.EXEC: {DataType.EXEC},
}

def is_compatible(source: DataType, target: DataType) -> bool:
    """True when an output of type `source` may feed an input of type `target`."""
    return target in PORT_COMPATIBILITY.get(source, set())
