# Procedural noise WGSL snippets

from .snippet import Snippet

# sin-based 2D hash, one float per lattice point
HASH_21 = "fract(sin(dot({p}, vec2<f32>(12.9898, 78.233))) * 43758.5453)"

def _hash_at(cell: str, offset) -> str:
    point = cell if offset is None else f"{cell} + vec2<f32>({offset})"
    return HASH_21.replace("{p}", point)

# Bilinear value noise with smoothstep fade
VALUE_NOISE = Snippet(
    temps=('p', 'cell', 'f', 'fade', 'a', 'b', 'c', 'd', 'value'),
    lines=(
        "let {p} = {uv} * {scale};",
        "let {cell} = floor({p});",
        "let {f} = fract({p});",
        "let {fade} = {f} * {f} * (3.0 - 2.0 * {f});",
        "let {a} = " + _hash_at("{cell}", None) + ";",
        "let {b} = " + _hash_at("{cell}", "1.0, 0.0") + ";",
        "let {c} = " + _hash_at("{cell}", "0.0, 1.0") + ";",
        "let {d} = " + _hash_at("{cell}", "1.0, 1.0") + ";",
        "let {value} = mix(mix({a}, {b}, {fade}.x), mix({c}, {d}, {fade}.x), {fade}.y);",
    ),
)
