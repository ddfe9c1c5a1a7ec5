# Color conversion WGSL snippets
# RGB <-> HSV, branchless form

from .snippet import Snippet

HSV_TO_RGB = Snippet(
    temps=('hsv', 'k', 'p', 'rgb'),
    lines=(
        "let {hsv} = {value};",
        "let {k} = vec4<f32>(1.0, 2.0 / 3.0, 1.0 / 3.0, 3.0);",
        "let {p} = abs(fract({hsv}.xxx + {k}.xyz) * 6.0 - {k}.www);",
        "let {rgb} = {hsv}.z * mix({k}.xxx, clamp({p} - {k}.xxx, vec3<f32>(0.0), vec3<f32>(1.0)), {hsv}.y);",
    ),
)

RGB_TO_HSV = Snippet(
    temps=('rgb', 'k', 'p', 'q', 'd', 'e', 'hsv'),
    lines=(
        "let {rgb} = {value};",
        "let {k} = vec4<f32>(0.0, -1.0 / 3.0, 2.0 / 3.0, -1.0);",
        "let {p} = mix(vec4<f32>({rgb}.bg, {k}.wz), vec4<f32>({rgb}.gb, {k}.xy), step({rgb}.b, {rgb}.g));",
        "let {q} = mix(vec4<f32>({p}.xyw, {rgb}.r), vec4<f32>({rgb}.r, {p}.yzx), step({p}.x, {rgb}.r));",
        "let {d} = {q}.x - min({q}.w, {q}.y);",
        "let {e} = 1.0e-10;",
        "let {hsv} = vec3<f32>(abs({q}.z + ({q}.w - {q}.y) / (6.0 * {d} + {e})), {d} / ({q}.x + {e}), {q}.x);",
    ),
)

# Factor is clamped so out-of-range inputs hold the end colors
COLOR_RAMP = Snippet(
    temps=('factor', 'color'),
    lines=(
        "let {factor} = clamp({t}, 0.0, 1.0);",
        "let {color}: vec4<f32> = mix({color_a}, {color_b}, {factor});",
    ),
)
