from typing import Any, Dict, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator

from .kinds import NodeKind
from .params import NodeParams, parse_params

# (node id, port id)
PortKey = Tuple[str, str]


class Node(BaseModel):
    """
    One node of a shader graph snapshot.

    `kind` stays a plain string: kinds unknown to the catalog are legal and
    simply emit nothing. `position` belongs to the editor and is never read
    by the compiler.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    kind: str = Field(validation_alias=AliasChoices('kind', 'type'), serialization_alias='type')
    position: Any = Field(default_factory=dict)
    data: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode='after')
    def check_params(self) -> 'Node':
        try:
            parse_params(self.kind, self.data)
        except ValidationError as exc:
            raise ValueError(f"invalid data for node '{self.id}' ({self.kind}): {exc}") from exc
        return self

    @property
    def params(self) -> Optional[NodeParams]:
        """Typed parameters for this node's kind (None if the kind has none)."""
        return parse_params(self.kind, self.data)

    @property
    def node_kind(self) -> Optional[NodeKind]:
        return NodeKind.parse(self.kind)


class Edge(BaseModel):
    """Data-flow connection `source.port -> target.port`."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    source_node_id: str = Field(
        validation_alias=AliasChoices('source_node_id', 'sourceNodeId', 'source'),
        serialization_alias='source')
    source_port_id: str = Field(
        validation_alias=AliasChoices('source_port_id', 'sourcePortId', 'sourceHandle'),
        serialization_alias='sourceHandle')
    target_node_id: str = Field(
        validation_alias=AliasChoices('target_node_id', 'targetNodeId', 'target'),
        serialization_alias='target')
    target_port_id: str = Field(
        validation_alias=AliasChoices('target_port_id', 'targetPortId', 'targetHandle'),
        serialization_alias='targetHandle')

    @property
    def source_key(self) -> PortKey:
        return (self.source_node_id, self.source_port_id)

    @property
    def target_key(self) -> PortKey:
        return (self.target_node_id, self.target_port_id)


class Graph(BaseModel):
    """Immutable snapshot of a shader graph handed to the compiler."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    name: str = "Untitled Shader"
    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()

    def node_map(self) -> Dict[str, Node]:
        """Map node id -> node. With duplicate ids the first node wins."""
        result: Dict[str, Node] = {}
        for node in self.nodes:
            result.setdefault(node.id, node)
        return result

    def find_output_node(self) -> Optional[Node]:
        """First PBR Output node in node order; later ones are ignored."""
        for node in self.nodes:
            if node.kind == NodeKind.PBR_OUTPUT.value:
                return node
        return None

    def input_edge_map(self) -> Dict[PortKey, Edge]:
        """
        Map (target node, target port) -> edge feeding it.

        With several edges into one input, the first in edge order wins.
        """
        result: Dict[PortKey, Edge] = {}
        for edge in self.edges:
            result.setdefault(edge.target_key, edge)
        return result

    def outgoing_edges(self, node_id: str) -> List[Edge]:
        return [e for e in self.edges if e.source_node_id == node_id]


__all__ = ['Node', 'Edge', 'Graph', 'PortKey']
