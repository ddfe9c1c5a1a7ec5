# Voronoi (cellular) WGSL snippets

from .snippet import Snippet

# F1 distance over the 3x3 neighbourhood of the current cell
VORONOI_F1 = Snippet(
    temps=('p', 'cell', 'local', 'dist', 'y', 'x', 'offset', 'h', 'point'),
    lines=(
        "let {p} = {uv} * {scale};",
        "let {cell} = floor({p});",
        "let {local} = fract({p});",
        "var {dist} = 8.0;",
        "for (var {y}: i32 = -1; {y} <= 1; {y} = {y} + 1) {{",
        "  for (var {x}: i32 = -1; {x} <= 1; {x} = {x} + 1) {{",
        "    let {offset} = vec2<f32>(f32({x}), f32({y}));",
        "    let {h} = {cell} + {offset};",
        "    let {point} = fract(sin(vec2<f32>(dot({h}, vec2<f32>(127.1, 311.7)), dot({h}, vec2<f32>(269.5, 183.3)))) * 43758.5453);",
        "    {dist} = min({dist}, length({offset} + {point} - {local}));",
        "  }}",
        "}}",
    ),
)
