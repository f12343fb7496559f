from __future__ import annotations

def _pick_glsl_version(ctx_version_code: int) -> int:
    """Pick a GLSL version compatible with the active OpenGL context.

    - For OpenGL >= 3.3: use GLSL 330
    - For OpenGL >= 3.2: use GLSL 150
    """
    if ctx_version_code >= 330:
        return 330
    if ctx_version_code >= 320:
        return 150
    # As a last resort, try 150; but the project targets modern contexts.
    return 150

_VERT_BODY = """
in vec3 in_pos;
in vec3 in_color;

uniform mat4 u_proj;
uniform mat4 u_view;

out vec3 v_color;
out float v_depth;

void main() {
    vec4 view_pos = u_view * vec4(in_pos, 1.0);
    v_color = in_color;
    v_depth = -view_pos.z;
    gl_Position = u_proj * view_pos;
}
"""

_FRAG_BODY = """in vec3 v_color;
in float v_depth;

uniform vec3 u_clear_color;
uniform float u_fade_start;
uniform float u_fade_end;

out vec4 f_color;

void main() {
    // Fade distant lines into the background.
    float fade = smoothstep(u_fade_start, u_fade_end, v_depth);
    f_color = vec4(mix(v_color, u_clear_color, fade), 1.0);
}
"""

_HUD_VERT_BODY = """
in vec2 in_pos;
in vec2 in_uv;
out vec2 v_uv;
void main() {
    v_uv = in_uv;
    gl_Position = vec4(in_pos, 0.0, 1.0);
}
"""

_HUD_FRAG_BODY = """uniform sampler2D u_tex;
in vec2 v_uv;
out vec4 f_color;
void main() {
    f_color = texture(u_tex, v_uv);
}
"""

def shader_sources(ctx_version_code: int) -> tuple[str, str]:
    ver = _pick_glsl_version(ctx_version_code)
    prefix = f"#version {ver}\n"
    return prefix + _VERT_BODY, prefix + _FRAG_BODY

def hud_shader_sources(ctx_version_code: int) -> tuple[str, str]:
    ver = _pick_glsl_version(ctx_version_code)
    prefix = f"#version {ver}\n"
    return prefix + _HUD_VERT_BODY, prefix + _HUD_FRAG_BODY
