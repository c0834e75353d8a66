"""
GLSL shader upgrade: rewrites GLSL ES 1.00 shaders for GLSL 1.50.

Usage:
    from glsl_upgrade import transpile_fragment, transpile_vertex

    fragment_150 = transpile_fragment(fragment_100)
    vertex_150 = transpile_vertex(vertex_100)
"""

from .errors import (
    MissingSemicolonError,
    ReservedAttributeNameError,
    TranspileError,
    UnknownVersionError,
)
from .transformer.identifier_sanitizer import map_name, unmap_name
from .transpiler import (
    ShaderStage,
    ShaderTranspiler,
    transpile,
    transpile_fragment,
    transpile_vertex,
)

__all__ = [
    'MissingSemicolonError',
    'ReservedAttributeNameError',
    'ShaderStage',
    'ShaderTranspiler',
    'TranspileError',
    'UnknownVersionError',
    'map_name',
    'transpile',
    'transpile_fragment',
    'transpile_vertex',
    'unmap_name',
]
