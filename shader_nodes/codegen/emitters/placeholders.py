# Placeholder Emitters
# Node kinds whose real implementation needs runtime support (texture
# bindings) the compiler does not have yet. Each binds a fixed stub value so
# downstream nodes still compile; this is expected output, not a defect.

# (literal, comment)
TEXTURE_SAMPLE_PLACEHOLDER = ("vec4<f32>(1.0, 0.0, 1.0, 1.0)", "Texture sample placeholder")
NORMAL_MAP_PLACEHOLDER = ("vec3<f32>(0.0, 0.0, 1.0)", "Normal map placeholder")
VORONOI_COLOR_PLACEHOLDER = ("vec3<f32>(0.5, 0.5, 0.5)", "Voronoi color placeholder")


def emit_placeholder(placeholder, port_id, ctx):
    literal, comment = placeholder
    var = ctx.new_var()
    ctx.emit(f"let {var} = {literal}; // {comment}")
    ctx.bind(port_id, var)


def emit_texture_sample(node, ctx):
    # TODO: sample the bound texture once the renderer exposes texture bindings
    emit_placeholder(TEXTURE_SAMPLE_PLACEHOLDER, 'color', ctx)


def emit_normal_map(node, ctx):
    emit_placeholder(NORMAL_MAP_PLACEHOLDER, 'normal', ctx)
