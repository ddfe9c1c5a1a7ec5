# WGSL Emitters Package
# Modular handlers for emitting WGSL code per node kind

from .registry import EMITTER_REGISTRY, get_emitter

__all__ = ['EMITTER_REGISTRY', 'get_emitter']
