import unittest

import pytest

from shader_nodes.codegen.emitters import EMITTER_REGISTRY, get_emitter
from shader_nodes.codegen.emitters.const import default_value, format_fixed, format_number, zero_value
from shader_nodes.codegen.shader_context import CompileContext, ShaderContext
from shader_nodes.ir.graph import Node
from shader_nodes.ir.kinds import NodeKind
from shader_nodes.ir.types import DataType
from shader_nodes.nodes import DEFAULT_CATALOG
from shader_nodes.nodes.base import Port

EMITTED_KINDS = [k for k in NodeKind if k is not NodeKind.PBR_OUTPUT]


def run_emitter(kind, data=None, inputs=None):
    """Emit one node with default inputs (overridable) and return the context."""
    node = Node(id='n', kind=kind, data=data or {})
    definition = DEFAULT_CATALOG.lookup(kind)
    resolved = {p.id: default_value(p) for p in definition.inputs}
    resolved.update(inputs or {})
    ctx = CompileContext()
    get_emitter(kind)(node, ShaderContext(ctx, node, definition, resolved))
    return ctx


# =============================================================================
# Registry
# =============================================================================

def test_every_kind_has_an_emitter():
    missing = [k.value for k in EMITTED_KINDS if k not in EMITTER_REGISTRY]
    assert missing == []


def test_output_kind_has_no_emitter():
    assert get_emitter('pbr_output') is None


def test_unknown_kind_has_no_emitter():
    assert get_emitter('hologram') is None


@pytest.mark.parametrize('kind', [k.value for k in EMITTED_KINDS])
def test_emitter_binds_every_declared_output(kind):
    ctx = run_emitter(kind)
    definition = DEFAULT_CATALOG.lookup(kind)
    for port in definition.outputs:
        assert ctx.lookup('n', port.id) is not None, port.id


# =============================================================================
# Literals
# =============================================================================

class TestLiterals(unittest.TestCase):

    def test_format_number(self):
        self.assertEqual(format_number(0), "0")
        self.assertEqual(format_number(1.0), "1")
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(-2.25), "-2.25")

    def test_format_fixed(self):
        self.assertEqual(format_fixed(0.25), "0.2500")
        self.assertEqual(format_fixed(1), "1.0000")

    def test_format_fixed_rounds_ties_up(self):
        self.assertEqual(format_fixed(0.15625), "0.1563")
        self.assertEqual(format_fixed(0.03125), "0.0313")
        self.assertEqual(format_fixed(-0.15625), "-0.1563")
        self.assertEqual(format_fixed(-0.00001), "0.0000")

    def test_zero_values(self):
        self.assertEqual(zero_value(DataType.FLOAT), "0.0")
        self.assertEqual(zero_value(DataType.VEC2), "vec2<f32>(0.0, 0.0)")
        self.assertEqual(zero_value(DataType.VEC3), "vec3<f32>(0.0, 0.0, 0.0)")
        self.assertEqual(zero_value(DataType.VEC4), "vec4<f32>(0.0, 0.0, 0.0, 1.0)")
        self.assertEqual(zero_value(DataType.COLOR), "vec4<f32>(0.0, 0.0, 0.0, 1.0)")
        self.assertEqual(zero_value(DataType.TEXTURE2D), "0.0")

    def test_default_value_prefers_declared_default(self):
        self.assertEqual(default_value(Port('a', 'A', DataType.FLOAT, 0)), "0")
        self.assertEqual(default_value(Port('v', 'V', DataType.VEC3, (0, 0.5, 1))),
                         "vec3<f32>(0, 0.5, 1)")
        self.assertEqual(default_value(Port('n', 'N', DataType.VEC3)),
                         "vec3<f32>(0.0, 0.0, 0.0)")


# =============================================================================
# Per-family output
# =============================================================================

class TestArithmetic(unittest.TestCase):

    def test_operators(self):
        for kind, symbol, default in (('add', '+', '0'), ('subtract', '-', '0'),
                                      ('multiply', '*', '1'), ('divide', '/', '1')):
            ctx = run_emitter(kind)
            self.assertEqual(ctx.statements, [f"let var_0 = {default} {symbol} {default};"])
            self.assertEqual(ctx.lookup('n', 'result'), 'var_0')

    def test_connected_operands(self):
        ctx = run_emitter('multiply', inputs={'a': 'globals.time', 'b': 'var_7'})
        self.assertEqual(ctx.statements, ["let var_0 = globals.time * var_7;"])


class TestMathFunctions(unittest.TestCase):

    def test_typed_calls(self):
        cases = {
            'power': "let var_0: f32 = pow(1, 2);",
            'sqrt': "let var_0: f32 = sqrt(1);",
            'abs': "let var_0: f32 = abs(0);",
            'clamp': "let var_0: f32 = clamp(0, 0, 1);",
            'lerp': "let var_0: f32 = mix(0, 1, 0.5);",
            'step': "let var_0: f32 = step(0.5, 0);",
            'smoothstep': "let var_0: f32 = smoothstep(0, 1, 0.5);",
            'sin': "let var_0: f32 = sin(0);",
            'cos': "let var_0: f32 = cos(0);",
            'tan': "let var_0: f32 = tan(0);",
            'fract': "let var_0: f32 = fract(0);",
            'floor': "let var_0: f32 = floor(0);",
            'min': "let var_0: f32 = min(0, 0);",
            'max': "let var_0: f32 = max(0, 0);",
        }
        for kind, expected in cases.items():
            with self.subTest(kind=kind):
                self.assertEqual(run_emitter(kind).statements, [expected])


class TestVector(unittest.TestCase):
    ZERO3 = "vec3<f32>(0.0, 0.0, 0.0)"

    def test_vector_calls(self):
        z = self.ZERO3
        self.assertEqual(run_emitter('normalize').statements,
                         [f"let var_0: vec3<f32> = normalize({z});"])
        self.assertEqual(run_emitter('dot_product').statements,
                         [f"let var_0: f32 = dot({z}, {z});"])
        self.assertEqual(run_emitter('cross_product').statements,
                         [f"let var_0: vec3<f32> = cross({z}, {z});"])
        self.assertEqual(run_emitter('length').statements,
                         [f"let var_0: f32 = length({z});"])

    def test_split_binds_components(self):
        ctx = run_emitter('split_vec3', inputs={'vector': 'in.world_normal'})
        self.assertEqual(ctx.statements, [
            "let var_0 = in.world_normal.x;",
            "let var_1 = in.world_normal.y;",
            "let var_2 = in.world_normal.z;",
        ])
        self.assertEqual([ctx.lookup('n', c) for c in 'xyz'], ['var_0', 'var_1', 'var_2'])

    def test_combine(self):
        ctx = run_emitter('combine_vec3', inputs={'y': 'globals.time'})
        self.assertEqual(ctx.statements, ["let var_0 = vec3<f32>(0, globals.time, 0);"])
        self.assertEqual(ctx.lookup('n', 'vector'), 'var_0')


class TestSources(unittest.TestCase):

    def test_builtins_emit_nothing(self):
        expected = {
            'vertex_position': ('position', 'in.world_position.xyz'),
            'vertex_normal': ('normal', 'in.world_normal'),
            'vertex_uv': ('uv', 'in.uv'),
            'time': ('time', 'globals.time'),
            'camera_position': ('position', 'view.world_position.xyz'),
        }
        for kind, (port, expression) in expected.items():
            ctx = run_emitter(kind)
            self.assertEqual(ctx.statements, [])
            self.assertEqual(ctx.lookup('n', port), expression)

    def test_color_constant_default_is_white(self):
        ctx = run_emitter('color_constant')
        self.assertEqual(ctx.statements, ["let var_0 = vec4<f32>(1.0000, 1.0000, 1.0000, 1.0000);"])

    def test_color_constant_exact_halves(self):
        ctx = run_emitter('color_constant', data={'color': [0.15625, 0.03125, 0.0, 1.0]})
        self.assertEqual(ctx.statements, ["let var_0 = vec4<f32>(0.1563, 0.0313, 0.0000, 1.0000);"])

    def test_color_constant_rgb_gets_alpha(self):
        ctx = run_emitter('color_constant', data={'color': [0.2, 0.4, 0.6]})
        self.assertEqual(ctx.statements, ["let var_0 = vec4<f32>(0.2000, 0.4000, 0.6000, 1.0000);"])


class TestMultiStatement(unittest.TestCase):

    def test_fresnel(self):
        ctx = run_emitter('fresnel', inputs={'normal': 'in.world_normal', 'view': 'var_9'})
        self.assertEqual(ctx.statements, [
            "let var_0 = max(dot(in.world_normal, var_9), 0.0);",
            "let var_1 = pow(1.0 - var_0, 5);",
        ])
        self.assertEqual(ctx.lookup('n', 'result'), 'var_1')

    def test_noise_binds_last_temp(self):
        ctx = run_emitter('noise_texture', inputs={'uv': 'in.uv'})
        self.assertEqual(ctx.statements[0], "let var_0 = in.uv * 1;")
        self.assertEqual(len(ctx.statements), 9)
        self.assertEqual(ctx.lookup('n', 'value'), 'var_8')

    def test_voronoi(self):
        ctx = run_emitter('voronoi_texture', inputs={'uv': 'in.uv'})
        self.assertEqual(ctx.statements[0], "let var_0 = in.uv * 5;")
        self.assertIn("var var_3 = 8.0;", ctx.statements)
        self.assertEqual(ctx.lookup('n', 'distance'), 'var_3')
        self.assertEqual(ctx.statements[-1],
                         "let var_9 = vec3<f32>(0.5, 0.5, 0.5); // Voronoi color placeholder")
        self.assertEqual(ctx.lookup('n', 'color'), 'var_9')

    def test_color_conversions(self):
        ctx = run_emitter('hsv_to_rgb', inputs={'hsv': 'var_5'})
        self.assertEqual(ctx.statements[0], "let var_0 = var_5;")
        self.assertEqual(ctx.lookup('n', 'rgb'), 'var_3')

        ctx = run_emitter('rgb_to_hsv', inputs={'rgb': 'var_5'})
        self.assertEqual(len(ctx.statements), 7)
        self.assertEqual(ctx.lookup('n', 'hsv'), 'var_6')


class TestPlaceholders(unittest.TestCase):

    def test_texture_sample(self):
        ctx = run_emitter('texture_sample', data={'textureId': 'albedo'})
        self.assertEqual(ctx.statements,
                         ["let var_0 = vec4<f32>(1.0, 0.0, 1.0, 1.0); // Texture sample placeholder"])
        self.assertEqual(ctx.lookup('n', 'color'), 'var_0')

    def test_normal_map(self):
        ctx = run_emitter('normal_map')
        self.assertEqual(ctx.statements,
                         ["let var_0 = vec3<f32>(0.0, 0.0, 1.0); // Normal map placeholder"])
        self.assertEqual(ctx.lookup('n', 'normal'), 'var_0')
