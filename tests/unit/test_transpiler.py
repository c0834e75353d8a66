"""
End-to-end tests for shader upgrade.

Tests:
- Legacy fragment and vertex shaders
- Target-version and "300 es" shaders
- Shaders without a #version directive
- Idempotence of re-transpiling
- Error propagation
- Injected collaborators
"""

import pytest
from glsl_upgrade import (
    MissingSemicolonError,
    ReservedAttributeNameError,
    ShaderStage,
    ShaderTranspiler,
    UnknownVersionError,
    transpile,
    transpile_fragment,
    transpile_vertex,
    unmap_name,
)
from glsl_upgrade.lexer import tokenize

HEADER = "#version 150\n#extension GL_ARB_separate_shader_objects : enable\n"


@pytest.fixture
def transpiler():
    """Create transpiler targeting GLSL 150."""
    return ShaderTranspiler('150')


# ============================================================================
# 1. Legacy fragment shaders
# ============================================================================

def test_fragment_example():
    """Test the canonical varying + gl_FragColor + texture2D example."""
    source = "varying vec2 uv; void main(){ gl_FragColor = texture2D(tex, uv); }"
    assert transpile_fragment(source) == (
        HEADER
        + "out vec4 unique_fragColor;\n"
        + "in vec2 uv; void main(){ unique_fragColor = texture(tex, uv); }"
    )


def test_fragment_with_precision_and_derivatives():
    """Test a versioned fragment shader with precision and a core extension."""
    source = (
        "#version 100\n"
        "#extension GL_OES_standard_derivatives : enable\n"
        "precision mediump float;\n"
        "varying vec2 uv;\n"
        "void main() {\n"
        "    gl_FragColor = vec4(fwidth(uv), 0.0, 1.0);\n"
        "}\n"
    )
    assert transpile_fragment(source) == (
        HEADER
        + "\n"
        + "precision mediump float;\n"
        + "out vec4 unique_fragColor;\n"
        + "in vec2 uv;\n"
        + "void main() {\n"
        + "    unique_fragColor = vec4(fwidth(uv), 0.0, 1.0);\n"
        + "}\n"
    )


@pytest.mark.parametrize("count", [1, 2, 5])
def test_frag_color_single_declaration(count):
    """Test N gl_FragColor references give one declaration and N uses."""
    body = "gl_FragColor = vec4(1.0);" * count
    result = transpile_fragment(f"void main() {{ {body} }}")
    assert result.count("out vec4 unique_fragColor;") == 1
    assert result.count("unique_fragColor") == count + 1
    assert "gl_FragColor" not in result


def test_frag_color_and_depth():
    """Test that both magic outputs are declared."""
    source = "void main(){gl_FragColor=vec4(1.0);gl_FragDepth=0.5;}"
    assert transpile_fragment(source) == (
        HEADER
        + "out float unique_fragDepth;\n"
        + "out vec4 unique_fragColor;\n"
        + "void main(){unique_fragColor=vec4(1.0);unique_fragDepth=0.5;}"
    )


def test_frag_depth_ext():
    """Test GL_EXT_frag_depth is pruned and gl_FragDepthEXT is replaced."""
    source = (
        "#version 100\n"
        "#extension GL_EXT_frag_depth : enable\n"
        "void main(){gl_FragDepthEXT=0.5;}"
    )
    result = transpile_fragment(source)
    assert "GL_EXT_frag_depth" not in result
    assert "out float unique_fragDepth;" in result
    assert "unique_fragDepth=0.5;" in result


@pytest.mark.parametrize("call", [
    "texture2D(a,b)", "textureCube(a,b)", "texture(a,b)",
])
def test_texture_calls_normalized(call):
    """Test legacy texture calls become texture()."""
    result = transpile_fragment(f"void main(){{ x = {call}; }}")
    assert "x = texture(a,b);" in result


def test_reserved_identifier_renamed():
    """Test a user identifier named after a new built-in is escaped."""
    source = (
        "uniform sampler2D texture;\n"
        "varying vec2 uv;\n"
        "void main(){ gl_FragColor = texture2D(texture, uv); }"
    )
    result = transpile_fragment(source)
    assert "uniform sampler2D unique_texture;" in result
    assert "texture(unique_texture, uv)" in result
    assert unmap_name("unique_texture") == "texture"


def test_user_frag_color_does_not_collide():
    """Test a user variable named fragColor is kept apart from the output."""
    source = "vec4 fragColor; void main(){ gl_FragColor = fragColor; }"
    assert transpile_fragment(source) == (
        HEADER
        + "out vec4 unique_fragColor;\n"
        + "vec4 fragColor; void main(){ unique_fragColor = fragColor; }"
    )


def test_user_escaped_name_does_not_collide():
    """Test a user variable already named like the output is escaped again."""
    source = "vec4 unique_fragColor; void main(){ gl_FragColor = unique_fragColor; }"
    assert transpile_fragment(source) == (
        HEADER
        + "out vec4 unique_fragColor;\n"
        + "vec4 unique_unique_fragColor; "
        + "void main(){ unique_fragColor = unique_unique_fragColor; }"
    )


# ============================================================================
# 2. Legacy vertex shaders
# ============================================================================

def test_vertex_shader():
    """Test attribute/varying rewriting in a vertex shader."""
    source = (
        "attribute vec3 position;\n"
        "varying vec2 uv;\n"
        "void main(){uv=position.xy;gl_Position=vec4(position,1.0);}"
    )
    assert transpile_vertex(source) == (
        HEADER
        + "in vec3 position;\n"
        + "out vec2 uv;\n"
        + "void main(){uv=position.xy;gl_Position=vec4(position,1.0);}"
    )


def test_vertex_reserved_attribute_rejected():
    """Test a reserved attribute name raises and produces no output."""
    source = "attribute vec2 texture;\nvoid main(){gl_Position=vec4(texture,0.0,1.0);}"
    with pytest.raises(ReservedAttributeNameError) as exc_info:
        transpile_vertex(source)
    assert exc_info.value.name == 'texture'


def test_unversioned_reserved_attribute_message():
    """Test the error message does not claim a source version the shader lacks."""
    source = "attribute vec2 texture;\nvoid main(){gl_Position=vec4(texture,0.0,1.0);}"
    with pytest.raises(ReservedAttributeNameError) as exc_info:
        transpile_vertex(source)
    assert "GLSL 100" not in str(exc_info.value)
    assert str(exc_info.value).startswith("Unable to transpile to 150 automatically")


def test_vertex_prefixed_attribute_kept():
    """Test an attribute that already carries the escape prefix is accepted."""
    source = "attribute float unique_id;\nvoid main(){gl_Position=vec4(unique_id);}"
    assert transpile_vertex(source) == (
        HEADER
        + "in float unique_id;\n"
        + "void main(){gl_Position=vec4(unique_id);}"
    )


def test_texture_call_next_to_reserved_sampler():
    """Test a texture() call keeps its name while a sampler named texture is escaped."""
    source = "uniform sampler2D texture;\nvoid main(){ gl_FragColor = texture(texture, vec2(0.0)); }"
    result = transpile_fragment(source)
    assert "uniform sampler2D unique_texture;" in result
    assert "unique_fragColor = texture(unique_texture, vec2(0.0));" in result

def test_vertex_reserved_varying_renamed():
    """Test a reserved varying is renamed consistently in both stages."""
    vertex = transpile_vertex("varying float round;\nvoid main(){round=1.0;}")
    fragment = transpile_fragment("varying float round;\nvoid main(){gl_FragColor=vec4(round);}")
    assert "out float unique_round;" in vertex
    assert "in float unique_round;" in fragment


def test_vertex_texture_lod():
    """Test texture2DLod in a vertex shader."""
    result = transpile_vertex("void main(){ vec4 c = texture2DLod(t, p, 0.0); }")
    assert "textureLod(t, p, 0.0)" in result


# ============================================================================
# 3. Modern and unversioned shaders
# ============================================================================

def test_target_version_only_gains_extensions():
    """Test a 150 shader is returned with the extension block only."""
    source = "#version 150\nin vec2 uv;\nout vec4 color;\nvoid main(){ color = vec4(uv, 0.0, 1.0); }"
    assert transpile_fragment(source) == (
        HEADER + "\nin vec2 uv;\nout vec4 color;\nvoid main(){ color = vec4(uv, 0.0, 1.0); }"
    )


def test_es3_shader_normalized_without_rewrites():
    """Test a 300 es shader only has its directive normalized."""
    source = (
        "#version 300 es\n"
        "precision highp float;\n"
        "in vec2 uv;\n"
        "out vec4 color;\n"
        "uniform sampler2D texture2;\n"
        "void main(){ color = texture(texture2, uv); }"
    )
    assert transpile_fragment(source) == (
        HEADER
        + "\n"
        + "precision highp float;\n"
        + "in vec2 uv;\n"
        + "out vec4 color;\n"
        + "uniform sampler2D texture2;\n"
        + "void main(){ color = texture(texture2, uv); }"
    )


def test_es3_shader_to_other_target_rejected():
    """Test the known boundary: 300 es cannot be upgraded to 330."""
    with pytest.raises(UnknownVersionError):
        transpile_fragment("#version 300 es\nvoid main(){}", target_version='330')


def test_unversioned_shader_gets_legacy_rewrite():
    """Test a shader without #version is treated as GLSL 100."""
    result = transpile_vertex("attribute vec2 a;\nvarying vec2 v;\nvoid main(){v=a;}")
    assert result.startswith(HEADER)
    assert "in vec2 a;" in result
    assert "out vec2 v;" in result


def test_unknown_version_rejected():
    """Test an unsupported version raises."""
    with pytest.raises(UnknownVersionError):
        transpile_fragment("#version 120\nvoid main(){}")


def test_missing_semicolon_rejected():
    """Test an unterminated precision statement raises during synthesis."""
    with pytest.raises(MissingSemicolonError):
        transpile_fragment("precision mediump float\nvoid main(){ gl_FragColor = vec4(1.0) }")


# ============================================================================
# 4. Idempotence and determinism
# ============================================================================

@pytest.mark.parametrize("source,stage", [
    ("varying vec2 uv; void main(){ gl_FragColor = texture2D(tex, uv); }", ShaderStage.FRAGMENT),
    ("#version 100\nattribute vec3 p;\nvoid main(){gl_Position=vec4(p,1.0);}", ShaderStage.VERTEX),
    ("#version 300 es\nout vec4 c;\nvoid main(){c=vec4(1.0);}", ShaderStage.FRAGMENT),
])
def test_retranspile_is_identity(transpiler, source, stage):
    """Test that upgrading an upgraded shader changes nothing."""
    once = transpiler.transpile(source, stage)
    assert transpiler.transpile(once, stage) == once


def test_transpile_is_deterministic(transpiler):
    """Test identical inputs give identical outputs."""
    source = "void main(){ gl_FragColor = vec4(1.0); }"
    first = transpiler.transpile(source, ShaderStage.FRAGMENT)
    second = transpiler.transpile(source, ShaderStage.FRAGMENT)
    assert first == second
    assert first.count("out vec4 unique_fragColor;") == 1


def test_transpile_function_matches_stage_helpers():
    """Test transpile() dispatches on the stage."""
    source = "varying vec2 uv;\nvoid main(){}"
    assert transpile(source, ShaderStage.VERTEX) == transpile_vertex(source)
    assert transpile(source, ShaderStage.FRAGMENT) == transpile_fragment(source)


# ============================================================================
# 5. Collaborators
# ============================================================================

def test_custom_collaborators():
    """Test that injected tokenizer and stringifier are used."""
    calls = []

    def recording_tokenizer(source):
        calls.append(source)
        return tokenize(source)

    def joining_stringifier(tokens):
        return '|'.join(token.text for token in tokens)

    transpiler = ShaderTranspiler(
        '150', tokenizer=recording_tokenizer, stringifier=joining_stringifier
    )
    result = transpiler.transpile("#version 150\n", ShaderStage.FRAGMENT)
    assert calls == ["#version 150\n"]
    assert result == "#version 150|\n|#extension GL_ARB_separate_shader_objects : enable|\n|\n"
