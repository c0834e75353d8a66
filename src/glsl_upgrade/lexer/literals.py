"""
Lexical tables for GLSL ES 1.00.

Words are classified against these tables when a shader is tokenized. Words
that only became keywords or built-ins in later dialects are deliberately
absent, so they reach the rewriting passes as plain identifiers.
"""

KEYWORDS = frozenset({
    # Storage and parameter qualifiers
    'attribute', 'const', 'uniform', 'varying', 'in', 'out', 'inout',
    'invariant',
    # Precision
    'precision', 'lowp', 'mediump', 'highp',
    # Control flow
    'break', 'continue', 'do', 'for', 'while', 'if', 'else', 'discard',
    'return',
    # Types
    'void', 'bool', 'int', 'float', 'true', 'false', 'struct',
    'vec2', 'vec3', 'vec4', 'ivec2', 'ivec3', 'ivec4', 'bvec2', 'bvec3', 'bvec4',
    'mat2', 'mat3', 'mat4',
    'sampler1D', 'sampler2D', 'sampler3D', 'samplerCube',
    'sampler1DShadow', 'sampler2DShadow',
    # Reserved for future use
    'asm', 'class', 'union', 'enum', 'typedef', 'template', 'this', 'packed',
    'goto', 'switch', 'default', 'inline', 'noinline', 'volatile', 'public',
    'static', 'extern', 'external', 'interface', 'long', 'short', 'double',
    'half', 'fixed', 'unsigned', 'input', 'output',
    'hvec2', 'hvec3', 'hvec4', 'dvec2', 'dvec3', 'dvec4', 'fvec2', 'fvec3', 'fvec4',
    'sampler2DRect', 'sampler3DRect', 'sampler2DRectShadow',
    'sizeof', 'cast', 'namespace', 'using',
})

BUILTINS = frozenset({
    # Variables
    'gl_Position', 'gl_PointSize', 'gl_FragCoord', 'gl_FrontFacing',
    'gl_PointCoord', 'gl_FragColor', 'gl_FragData', 'gl_FragDepth',
    'gl_FragDepthEXT',
    # Constants
    'gl_MaxVertexAttribs', 'gl_MaxVertexUniformVectors', 'gl_MaxVaryingVectors',
    'gl_MaxVertexTextureImageUnits', 'gl_MaxCombinedTextureImageUnits',
    'gl_MaxTextureImageUnits', 'gl_MaxFragmentUniformVectors',
    'gl_MaxDrawBuffers', 'gl_DepthRange', 'gl_DepthRangeParameters',
    # Angle and trigonometry
    'radians', 'degrees', 'sin', 'cos', 'tan', 'asin', 'acos', 'atan',
    # Exponential
    'pow', 'exp', 'log', 'exp2', 'log2', 'sqrt', 'inversesqrt',
    # Common
    'abs', 'sign', 'floor', 'ceil', 'fract', 'mod', 'min', 'max', 'clamp',
    'mix', 'step', 'smoothstep',
    # Geometric
    'length', 'distance', 'dot', 'cross', 'normalize', 'faceforward',
    'reflect', 'refract',
    # Matrix and vector relational
    'matrixCompMult', 'lessThan', 'lessThanEqual', 'greaterThan',
    'greaterThanEqual', 'equal', 'notEqual', 'any', 'all', 'not',
    # GL_OES_standard_derivatives
    'dFdx', 'dFdy', 'fwidth',
    # Texture lookup
    'texture2D', 'texture2DProj', 'texture2DLod', 'texture2DProjLod',
    'textureCube', 'textureCubeLod',
    # GL_EXT_shader_texture_lod
    'texture2DLodEXT', 'texture2DProjLodEXT', 'textureCubeLodEXT',
    'texture2DGradEXT', 'texture2DProjGradEXT', 'textureCubeGradEXT',
})

# Longest first so the tokenizer alternation prefers '<<=' over '<<' over '<'
OPERATORS = tuple(sorted({
    '<<=', '>>=', '++', '--', '<<', '>>', '<=', '>=', '==', '!=', '&&', '||',
    '^^', '+=', '-=', '*=', '/=', '%=', '&=', '^=', '|=',
    '(', ')', '[', ']', '{', '}', '.', ',', ';', ':', '?', '=',
    '+', '-', '*', '/', '%', '<', '>', '&', '|', '^', '!', '~',
}, key=lambda op: (-len(op), op)))
