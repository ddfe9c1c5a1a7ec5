"""
Top-level compile entry point.

``compile_graph`` is total: whatever the input, it returns a
``CompileResult``. Errors travel in ``CompileResult.error``; the generated
code is empty whenever an error is set.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .codegen.wgsl import ShaderGenerator
from .ir.graph import Graph


@dataclass(frozen=True)
class CompileResult:
    code: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, str]:
        """Plain-dict form: the error key is present only on failure."""
        if self.error is None:
            return {'code': self.code}
        return {'code': '', 'error': self.error}


def compile_graph(graph: Union[Graph, Mapping[str, Any]], catalog=None) -> CompileResult:
    """
    Compile a shader graph into a WGSL fragment shader.

    Args:
        graph: A Graph, or a mapping that validates into one
        catalog: Node type catalog (defaults to the built-in one)

    Returns:
        CompileResult with either the shader text or an error message
    """
    try:
        if not isinstance(graph, Graph):
            graph = Graph.model_validate(graph)
        code = ShaderGenerator(graph, catalog).generate()
        return CompileResult(code=code)
    except Exception as e:
        return CompileResult(code='', error=str(e))


__all__ = ['CompileResult', 'compile_graph']
