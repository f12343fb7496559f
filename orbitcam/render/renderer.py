from __future__ import annotations

import moderngl
import numpy as np

from orbitcam.config import CLEAR_COLOR, FADE_END, FADE_START
from orbitcam.render.shaders import hud_shader_sources, shader_sources


class Renderer:
    def __init__(self, ctx: moderngl.Context, width: int, height: int, lines: np.ndarray) -> None:
        self.ctx = ctx
        self.width = width
        self.height = height

        vert, frag = shader_sources(ctx.version_code)
        self.prog = self.ctx.program(vertex_shader=vert, fragment_shader=frag)
        self.prog["u_clear_color"].value = tuple(float(c) for c in CLEAR_COLOR)
        self.set_fade(FADE_START, FADE_END)

        self.ctx.enable(moderngl.DEPTH_TEST)
        self.ctx.disable(moderngl.CULL_FACE)

        # Scene lines: interleaved pos + color
        self._line_vbo = self.ctx.buffer(lines.astype(np.float32).tobytes())
        self._line_vao = self.ctx.vertex_array(self.prog, [(self._line_vbo, "3f 3f", "in_pos", "in_color")])

        # HUD quad (top-left)
        hvert, hfrag = hud_shader_sources(ctx.version_code)
        self._hud_prog = self.ctx.program(vertex_shader=hvert, fragment_shader=hfrag)
        quad = np.array([
            -0.98,  0.98, 0.0, 1.0,
            -0.30,  0.98, 1.0, 1.0,
            -0.98,  0.78, 0.0, 0.0,

            -0.30,  0.98, 1.0, 1.0,
            -0.30,  0.78, 1.0, 0.0,
            -0.98,  0.78, 0.0, 0.0,
        ], dtype=np.float32)
        self._hud_vbo = self.ctx.buffer(quad.tobytes())
        self._hud_vao = self.ctx.vertex_array(self._hud_prog, [(self._hud_vbo, "2f 2f", "in_pos", "in_uv")])
        self._hud_tex: moderngl.Texture | None = None
        self._hud_tex_size = (0, 0)

    def release(self) -> None:
        for obj in [self._line_vao, self._line_vbo, self._hud_vao, self._hud_vbo, self._hud_prog, self.prog]:
            obj.release()
        if self._hud_tex is not None:
            self._hud_tex.release()
            self._hud_tex = None

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.ctx.viewport = (0, 0, width, height)

    def set_fade(self, start: float, end: float) -> None:
        self.prog["u_fade_start"].value = float(start)
        self.prog["u_fade_end"].value = float(end)

    def begin_frame(self) -> None:
        self.ctx.clear(*CLEAR_COLOR, 1.0)

    def set_camera(self, view: np.ndarray, proj: np.ndarray) -> None:
        self.prog["u_view"].write(view.astype(np.float32).tobytes())
        self.prog["u_proj"].write(proj.astype(np.float32).tobytes())

    def draw_scene(self) -> None:
        self._line_vao.render(mode=moderngl.LINES)

    # --- HUD ---
    def hud_update_rgba(self, rgba_bytes: bytes, w: int, h: int) -> None:
        if self._hud_tex is None or self._hud_tex_size != (w, h):
            if self._hud_tex is not None:
                self._hud_tex.release()
            self._hud_tex = self.ctx.texture((w, h), 4, data=rgba_bytes)
            self._hud_tex.filter = (moderngl.NEAREST, moderngl.NEAREST)
            self._hud_tex.repeat_x = False
            self._hud_tex.repeat_y = False
            self._hud_tex_size = (w, h)
        else:
            self._hud_tex.write(rgba_bytes)

    def draw_hud(self) -> None:
        if self._hud_tex is None:
            return
        self.ctx.enable(moderngl.BLEND)
        self.ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)
        self.ctx.disable(moderngl.DEPTH_TEST)
        self._hud_tex.use(location=0)
        self._hud_prog["u_tex"].value = 0
        self._hud_vao.render(mode=moderngl.TRIANGLES)
        self.ctx.enable(moderngl.DEPTH_TEST)
        self.ctx.disable(moderngl.BLEND)
