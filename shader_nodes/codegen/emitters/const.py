# Literal formatting utilities for WGSL code generation

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Sequence

from ...ir.types import DataType
from ...nodes.base import Port


def format_number(value) -> str:
    """
    Format a catalog default the way the editor writes literals.

    Integral values lose their fractional part (`0`, `1`); everything else
    keeps Python's shortest round-trip form (`0.5`).
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_fixed(value, digits: int = 4) -> str:
    """
    Fixed-precision component, e.g. 0.25 -> '0.2500'.

    Rounds the exact binary value half away from zero, the way the editor
    formats colors (0.15625 -> '0.1563'). Zero never carries a sign.
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return format(rounded, "f")


def vector_literal(components: Sequence[Any], fmt=format_number) -> str:
    return f"vec{len(components)}<f32>({', '.join(fmt(c) for c in components)})"


def zero_value(dtype: DataType) -> str:
    """Zero literal for a type; vec4 and color get alpha 1.0."""
    if dtype == DataType.VEC2:
        return "vec2<f32>(0.0, 0.0)"
    if dtype == DataType.VEC3:
        return "vec3<f32>(0.0, 0.0, 0.0)"
    if dtype in (DataType.VEC4, DataType.COLOR):
        return "vec4<f32>(0.0, 0.0, 0.0, 1.0)"
    return "0.0"


def default_value(port: Port) -> str:
    """Literal used for an input with no usable connection."""
    if port.default is not None:
        if isinstance(port.default, (list, tuple)):
            return vector_literal(port.default)
        return format_number(port.default)
    return zero_value(port.data_type)
