from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Type

from ..ir.kinds import NodeKind
from ..ir.params import NodeParams, get_params_model
from ..ir.types import DataType


@dataclass(frozen=True)
class Port:
    """
    A named, typed input or output slot on a node kind.

    `default` is the literal used when an input is left unconnected: a
    number, a tuple of numbers (rendered as a vector), or None to fall back
    to the zero value of `data_type`.
    """
    id: str
    label: str
    data_type: DataType
    default: Optional[Any] = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class NodeTypeDefinition:
    kind: NodeKind
    category: str
    label: str
    description: str = ""
    inputs: Tuple[Port, ...] = field(default_factory=tuple)
    outputs: Tuple[Port, ...] = field(default_factory=tuple)

    @property
    def params(self) -> Optional[Type[NodeParams]]:
        """Typed parameter model for node data of this kind, if it has one."""
        return get_params_model(self.kind.value)

    def get_input(self, port_id: str) -> Optional[Port]:
        for port in self.inputs:
            if port.id == port_id:
                return port
        return None

    def get_output(self, port_id: str) -> Optional[Port]:
        for port in self.outputs:
            if port.id == port_id:
                return port
        return None


# Shorthands used by the category modules
def float_in(id, label, default=None):
    return Port(id, label, DataType.FLOAT, default)

def vec_in(id, label, dtype=DataType.VEC3, default=None):
    return Port(id, label, dtype, default)

def out(id, label, dtype=DataType.FLOAT):
    return Port(id, label, dtype)

RESULT = out('result', 'Result')
