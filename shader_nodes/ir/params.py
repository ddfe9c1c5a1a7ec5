# Per-kind node parameter models
# Validated when a Node is constructed, so malformed editor data fails at
# the load boundary instead of deep inside code generation.

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .kinds import NodeKind


class NodeParams(BaseModel):
    """Base for typed node parameters. Unknown keys are ignored."""
    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)


class ColorConstantParams(NodeParams):
    """RGBA color; an RGB triple gets alpha 1.0 appended."""
    color: List[float] = Field(default_factory=lambda: [1.0, 1.0, 1.0, 1.0])

    @field_validator('color')
    @classmethod
    def pad_rgba(cls, value: List[float]) -> List[float]:
        if len(value) == 3:
            return list(value) + [1.0]
        if len(value) != 4:
            raise ValueError(f"color must have 3 or 4 components, got {len(value)}")
        return value


class TextureSampleParams(NodeParams):
    # Binding is resolved by the renderer; the compiler only carries the id
    texture_id: Optional[str] = Field(default=None, alias='textureId')


NODE_PARAMS: Dict[NodeKind, Type[NodeParams]] = {
    NodeKind.COLOR_CONSTANT: ColorConstantParams,
    NodeKind.TEXTURE_SAMPLE: TextureSampleParams,
}


def get_params_model(kind: str) -> Optional[Type[NodeParams]]:
    """Get the parameter model for a kind string, or None if it takes none."""
    node_kind = NodeKind.parse(kind)
    if node_kind is None:
        return None
    return NODE_PARAMS.get(node_kind)


def parse_params(kind: str, data: Dict[str, Any]) -> Optional[NodeParams]:
    """Validate `data` against the kind's parameter model (None if it has none)."""
    model = get_params_model(kind)
    if model is None:
        return None
    return model.model_validate(data or {})


__all__ = ['NodeParams', 'ColorConstantParams', 'TextureSampleParams',
           'NODE_PARAMS', 'get_params_model', 'parse_params']
