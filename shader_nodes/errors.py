"""
Custom exceptions for Shader Nodes.

The compiler never lets these escape ``compile_graph``: every failure is
turned into a ``CompileResult`` carrying the exception message. They are
raised internally (and by the loader) so each failure path stays explicit.

Exception Hierarchy:
    ShaderNodesError (base)
    ├── CompilationError
    │   ├── NoOutputNodeError
    │   └── CyclicDependencyError
    └── GraphLoadError

Malformed per-node parameters are reported by pydantic's own
``ValidationError`` when the graph model is built.
"""


class ShaderNodesError(Exception):
    """Base exception for all Shader Nodes errors."""
    pass


# =============================================================================
# Compilation Errors
# =============================================================================

class CompilationError(ShaderNodesError):
    """Base exception for compilation/code generation errors."""
    pass


class NoOutputNodeError(CompilationError):
    """Raised when the graph has no PBR Output node."""

    def __init__(self, message: str = "No PBR Output node found. Add a PBR Output node to complete the shader."):
        super().__init__(message)


class CyclicDependencyError(CompilationError):
    """
    Raised when the topological sort cannot order every node.

    Attributes:
        node_ids: Ids of the nodes left unvisited (the cycle and anything
                  downstream of it)
    """

    def __init__(self, message: str = "Cyclic dependency detected in shader graph.", node_ids: list = None):
        super().__init__(message)
        self.node_ids = node_ids or []


# =============================================================================
# Load Errors
# =============================================================================

class GraphLoadError(ShaderNodesError):
    """Raised when a graph file cannot be read or parsed."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
