# Fragment shader template
# The surrounding entry point every generated shader shares.

from string import Template
from typing import Sequence

from ..config import SHADER_HEADER

# Continuation lines of a block sit at function-body indentation
BLOCK_SEPARATOR = '\n  '

FRAGMENT_TEMPLATE = Template("""
$header

@fragment
fn fragment(
  in: VertexOutput,
  @builtin(front_facing) is_front: bool,
) -> @location(0) vec4<f32> {
  var pbr_input = pbr_input_from_vertex_output(in, is_front, false);

  // Node computations
  $statements

  // Output assignments
  $assignments

  // Standard PBR lighting
  var output_color = pbr(pbr_input);

  return output_color;
}
""")


def assemble_shader(statements: Sequence[str], assignments: Sequence[str]) -> str:
    """
    Wrap node statements and output assignments in the fragment entry point.

    Empty blocks still leave their (blank) line behind; the result has no
    leading or trailing whitespace.
    """
    return FRAGMENT_TEMPLATE.substitute(
        header='\n'.join(SHADER_HEADER),
        statements=BLOCK_SEPARATOR.join(statements),
        assignments=BLOCK_SEPARATOR.join(assignments),
    ).strip()
