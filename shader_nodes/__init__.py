"""
Shader Nodes: compiles node-based material graphs into WGSL fragment shaders.

    >>> from shader_nodes import compile_graph, load_graph
    >>> result = compile_graph(load_graph("material.json"))
    >>> result.code if result.ok else result.error
"""

from .compiler import CompileResult, compile_graph
from .errors import (
    ShaderNodesError,
    CompilationError,
    NoOutputNodeError,
    CyclicDependencyError,
    GraphLoadError,
)
from .io import graph_from_dict, load_graph, save_graph
from .ir.graph import Edge, Graph, Node
from .ir.kinds import NodeKind
from .ir.types import DataType
from .nodes import DEFAULT_CATALOG, NodeCatalog

__version__ = "0.1.0"

__all__ = [
    'CompileResult', 'compile_graph',
    'ShaderNodesError', 'CompilationError', 'NoOutputNodeError',
    'CyclicDependencyError', 'GraphLoadError',
    'graph_from_dict', 'load_graph', 'save_graph',
    'Edge', 'Graph', 'Node', 'NodeKind', 'DataType',
    'DEFAULT_CATALOG', 'NodeCatalog',
]
