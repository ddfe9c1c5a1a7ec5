from typing import Dict, List, Optional

from ..ir.graph import Node, PortKey
from ..nodes.base import NodeTypeDefinition


class CompileContext:
    """
    Per-compile state shared by every emitter.

    A fresh instance is created for each compile so concurrent or repeated
    compiles never see each other's variables.
    """
    def __init__(self):
        self.var_counter = 0
        self.statements: List[str] = []
        # (node id, output port id) -> WGSL expression or variable name
        self.var_map: Dict[PortKey, str] = {}

    def new_var(self) -> str:
        """Allocate a never-before-used variable name."""
        name = f"var_{self.var_counter}"
        self.var_counter += 1
        return name

    def emit(self, statement: str) -> None:
        self.statements.append(statement)

    def bind(self, node_id: str, port_id: str, ref: str) -> None:
        self.var_map[(node_id, port_id)] = ref

    def lookup(self, node_id: str, port_id: str) -> Optional[str]:
        return self.var_map.get((node_id, port_id))


class ShaderContext:
    """
    Context object passed to WGSL emitters.
    Wraps the state required to generate WGSL for a single node.
    """
    def __init__(self,
                 compile_ctx: CompileContext,
                 node: Node,
                 definition: NodeTypeDefinition,
                 inputs: Dict[str, str]):
        self._compile_ctx = compile_ctx
        self.node = node
        self.definition = definition
        # port id -> resolved WGSL expression
        self.inputs = inputs

    def param(self, port_id: str) -> str:
        """Resolved expression for an input port."""
        return self.inputs[port_id]

    def new_var(self) -> str:
        return self._compile_ctx.new_var()

    def emit(self, statement: str) -> None:
        self._compile_ctx.emit(statement)

    def bind(self, port_id: str, ref: str) -> None:
        """Record the expression standing for one of this node's outputs."""
        self._compile_ctx.bind(self.node.id, port_id, ref)

    @property
    def output_id(self) -> str:
        """Id of the node's first declared output."""
        if self.definition.outputs:
            return self.definition.outputs[0].id
        return 'result'

    @property
    def output_type(self) -> str:
        """WGSL type of the node's first declared output."""
        if self.definition.outputs:
            return self.definition.outputs[0].data_type.wgsl_type()
        return 'f32'
