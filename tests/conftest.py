"""
Pytest configuration and shared fixtures for Shader Nodes tests.

This file provides:
1. Helpers that build graphs in the editor's field names
2. Shared fixtures for common graphs

Usage:
    pytest tests/ -v
"""

import pytest

from shader_nodes.ir.graph import Graph


# =============================================================================
# HELPERS
# =============================================================================

def make_node(node_id, kind, data=None):
    """Node dict as the editor serializes it."""
    return {'id': node_id, 'type': kind, 'position': {'x': 0, 'y': 0}, 'data': data or {}}


def make_edge(source, source_port, target, target_port, edge_id=None):
    return {
        'id': edge_id or f"e_{source}_{source_port}_{target}_{target_port}",
        'source': source,
        'sourceHandle': source_port,
        'target': target,
        'targetHandle': target_port,
    }


def make_graph(nodes, edges=(), name="Test Graph"):
    """
    Build a validated Graph from node/edge dicts.

    Example:
        graph = make_graph(
            [make_node('1', 'add'), make_node('2', 'pbr_output')],
            [make_edge('1', 'result', '2', 'roughness')],
        )
    """
    return Graph.model_validate({'id': 'test-graph', 'name': name,
                                 'nodes': list(nodes), 'edges': list(edges)})


# =============================================================================
# PYTEST FIXTURES
# =============================================================================

@pytest.fixture
def output_only_graph():
    """A graph holding nothing but a PBR Output node."""
    return make_graph([make_node('out', 'pbr_output')])


@pytest.fixture
def add_to_roughness_graph():
    """
    Unconnected Add feeding roughness.

    Structure:
        Add(defaults) -> PBR Output.roughness
    """
    return make_graph(
        [make_node('1', 'add'), make_node('2', 'pbr_output')],
        [make_edge('1', 'result', '2', 'roughness')],
    )


@pytest.fixture
def two_cycle_graph():
    """A.result -> B.a, B.result -> A.a, plus an unrelated Output node."""
    return make_graph(
        [make_node('a', 'add'), make_node('b', 'add'), make_node('out', 'pbr_output')],
        [make_edge('a', 'result', 'b', 'a'), make_edge('b', 'result', 'a', 'a')],
    )


@pytest.fixture
def material_graph():
    """
    A small but complete material.

    Structure:
        UV -> Noise -> ColorRamp.t -> Output.base_color
        Normal, Camera -> Fresnel -> Output.metallic
        Time -> Sin -> Output.roughness
        Normal -> Output.normal
    """
    return make_graph(
        [
            make_node('uv', 'vertex_uv'),
            make_node('noise', 'noise_texture'),
            make_node('dark', 'color_constant', {'color': [0.1, 0.1, 0.2, 1.0]}),
            make_node('light', 'color_constant', {'color': [0.9, 0.8, 0.6]}),
            make_node('ramp', 'color_ramp'),
            make_node('normal', 'vertex_normal'),
            make_node('camera', 'camera_position'),
            make_node('fresnel', 'fresnel'),
            make_node('time', 'time'),
            make_node('sin', 'sin'),
            make_node('out', 'pbr_output'),
        ],
        [
            make_edge('uv', 'uv', 'noise', 'uv'),
            make_edge('noise', 'value', 'ramp', 't'),
            make_edge('dark', 'color', 'ramp', 'color_a'),
            make_edge('light', 'color', 'ramp', 'color_b'),
            make_edge('ramp', 'color', 'out', 'base_color'),
            make_edge('normal', 'normal', 'fresnel', 'normal'),
            make_edge('camera', 'position', 'fresnel', 'view'),
            make_edge('fresnel', 'result', 'out', 'metallic'),
            make_edge('time', 'time', 'sin', 'value'),
            make_edge('sin', 'result', 'out', 'roughness'),
            make_edge('normal', 'normal', 'out', 'normal'),
        ],
        name="Banded Glaze",
    )
