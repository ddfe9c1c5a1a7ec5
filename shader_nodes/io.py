# Graph file loading and saving (JSON / YAML)

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

import yaml
from pydantic import ValidationError

from .config import GRAPH_FILE_SUFFIXES, YAML_SUFFIXES
from .errors import GraphLoadError
from .ir.graph import Graph

logger = logging.getLogger(__name__)


def graph_from_dict(data: Mapping[str, Any]) -> Graph:
    """Validate an in-memory graph snapshot (editor field names accepted)."""
    if not isinstance(data, Mapping):
        raise GraphLoadError(f"graph must be a mapping, got {type(data).__name__}")
    try:
        return Graph.model_validate(dict(data))
    except ValidationError as e:
        raise GraphLoadError(f"invalid graph: {e}") from e


def _parse(text: str, suffix: str, path: Path) -> Any:
    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise GraphLoadError(f"could not parse {path}: {e}", path=str(path)) from e


def load_graph(path: Union[str, Path]) -> Graph:
    """
    Read a graph file into a Graph.

    Raises:
        GraphLoadError: unknown extension, unreadable file, bad syntax or
            data that does not validate
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in GRAPH_FILE_SUFFIXES:
        raise GraphLoadError(
            f"unsupported graph file type '{suffix}' (expected one of "
            f"{', '.join(sorted(GRAPH_FILE_SUFFIXES))})", path=str(path))

    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise GraphLoadError(f"could not read {path}: {e}", path=str(path)) from e

    data = _parse(text, suffix, path)
    if data is None:
        raise GraphLoadError(f"{path} is empty", path=str(path))

    try:
        graph = graph_from_dict(data)
    except GraphLoadError as e:
        e.path = str(path)
        raise

    logger.debug("Loaded graph '%s' from %s: %d nodes, %d edges",
                 graph.name, path, len(graph.nodes), len(graph.edges))
    return graph


def save_graph(graph: Graph, path: Union[str, Path]) -> None:
    """Write a graph in editor field names; the format follows the extension."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in GRAPH_FILE_SUFFIXES:
        raise GraphLoadError(f"unsupported graph file type '{suffix}'", path=str(path))

    data = graph.model_dump(mode='json', by_alias=True)
    if suffix in YAML_SUFFIXES:
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding='utf-8')
    else:
        path.write_text(json.dumps(data, indent=2) + '\n', encoding='utf-8')
    logger.debug("Saved graph '%s' to %s", graph.name, path)


__all__ = ['graph_from_dict', 'load_graph', 'save_graph']
