"""
Static configuration for the source and target dialects.

All tables are immutable and shared read-only by every transpile call.
"""

LEGACY_VERSION = '100'
ES3_VERSION = '300 es'
# "300 es" shaders are normalized to this desktop version
BASELINE_VERSION = '150'
DEFAULT_TARGET_VERSION = '150'

# Folded into core by the target dialect; removed when upgrading
CORE_EXTENSIONS = (
    'GL_OES_standard_derivatives',
    'GL_EXT_frag_depth',
    'GL_EXT_draw_buffers',
    'GL_EXT_shader_texture_lod',
)

# Declared on every upgraded shader
REQUIRED_EXTENSIONS = (
    'GL_ARB_separate_shader_objects',
)

# Plain identifiers in GLSL ES 1.00 that are keywords or built-ins in the
# target dialect. Kept disjoint from lexer.literals so that every entry
# reaches the sanitizer as an 'ident' token.
RESERVED_WORDS = frozenset({
    # Qualifiers
    'layout', 'centroid', 'flat', 'smooth', 'noperspective', 'case',
    # Unsigned and non-square types
    'uint', 'uvec2', 'uvec3', 'uvec4',
    'mat2x2', 'mat2x3', 'mat2x4', 'mat3x2', 'mat3x3', 'mat3x4',
    'mat4x2', 'mat4x3', 'mat4x4',
    # Samplers
    'samplerCubeShadow', 'sampler1DArray', 'sampler2DArray',
    'sampler1DArrayShadow', 'sampler2DArrayShadow', 'samplerBuffer',
    'sampler2DMS', 'sampler2DMSArray',
    'isampler1D', 'isampler2D', 'isampler3D', 'isamplerCube',
    'isampler1DArray', 'isampler2DArray', 'isampler2DRect', 'isamplerBuffer',
    'isampler2DMS', 'isampler2DMSArray',
    'usampler1D', 'usampler2D', 'usampler3D', 'usamplerCube',
    'usampler1DArray', 'usampler2DArray', 'usampler2DRect', 'usamplerBuffer',
    'usampler2DMS', 'usampler2DMSArray',
    # Hyperbolic and rounding
    'sinh', 'cosh', 'tanh', 'asinh', 'acosh', 'atanh',
    'trunc', 'round', 'roundEven', 'isnan', 'isinf',
    # Bit casts and packing
    'floatBitsToInt', 'floatBitsToUint', 'intBitsToFloat', 'uintBitsToFloat',
    'packSnorm2x16', 'unpackSnorm2x16', 'packUnorm2x16', 'unpackUnorm2x16',
    'packHalf2x16', 'unpackHalf2x16',
    # Matrix
    'outerProduct', 'transpose', 'determinant', 'inverse',
    # Texture lookup
    'texture', 'textureSize', 'textureProj', 'textureLod', 'textureOffset',
    'texelFetch', 'texelFetchOffset', 'textureProjOffset', 'textureLodOffset',
    'textureProjLod', 'textureProjLodOffset', 'textureGrad',
    'textureGradOffset', 'textureProjGrad', 'textureProjGradOffset',
})

# Target texture built-ins; a call to one of these is not a user identifier
TEXTURE_FUNCTIONS = frozenset(
    word for word in RESERVED_WORDS if word.startswith(('texture', 'texel'))
)
