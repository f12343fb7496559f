from __future__ import annotations

import time
import numpy as np
import pygame
import moderngl

from orbitcam.config import (
    APP_VERSION, FPS_CAP,
    GRID_COLOR, CUBE_COLOR, AXIS_X_COLOR, AXIS_Y_COLOR, AXIS_Z_COLOR,
)
from orbitcam.input import InputRecord
from orbitcam.render.camera import OrbitCamera
from orbitcam.render.meshes import build_axes_lines, build_cube_lines, build_grid_lines
from orbitcam.render.renderer import Renderer

def _init_pygame_gl() -> None:
    pygame.init()
    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE)
    pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)
    pygame.display.gl_set_attribute(pygame.GL_DOUBLEBUFFER, 1)

def _surface_to_rgba_bytes(surf: pygame.Surface) -> tuple[bytes, int, int]:
    s = surf.convert_alpha()
    w, h = s.get_size()
    data = pygame.image.tostring(s, "RGBA", False)
    return data, w, h

def build_scene(grid_extent: float, grid_step: float) -> np.ndarray:
    return np.concatenate([
        build_grid_lines(grid_extent, grid_step, GRID_COLOR),
        build_axes_lines(1.5, (AXIS_X_COLOR, AXIS_Y_COLOR, AXIS_Z_COLOR)),
        build_cube_lines((0.0, 0.5, 0.0), 1.0, CUBE_COLOR),
    ], axis=0)

def hud_lines(cam: OrbitCamera, fps_est: float) -> list[str]:
    pos = cam.get_position()
    tgt = cam.get_target()
    fwd = cam.get_forward()
    dist = float(np.linalg.norm(pos - tgt))
    return [
        f"orbitcam v{APP_VERSION}",
        f"eye=({pos[0]:.2f}, {pos[1]:.2f}, {pos[2]:.2f}) dist={dist:.3f}",
        f"target=({tgt[0]:.2f}, {tgt[1]:.2f}, {tgt[2]:.2f})",
        f"forward=({fwd[0]:.2f}, {fwd[1]:.2f}, {fwd[2]:.2f}) fps~{fps_est:.0f}",
    ]

def run_app(
    *,
    position: tuple[float, float, float],
    target: tuple[float, float, float],
    width: int,
    height: int,
    grid_extent: float,
    grid_step: float,
    debug: bool,
) -> None:
    _init_pygame_gl()

    flags = pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE
    pygame.display.set_mode((width, height), flags)
    pygame.display.set_caption(f"orbitcam v{APP_VERSION}")

    try:
        ctx = moderngl.create_context()
    except Exception as e:
        pygame.quit()
        raise RuntimeError("Failed to create ModernGL context (need OpenGL 3.2+)") from e

    if debug:
        print(f"[orbitcam] moderngl ctx version_code={ctx.version_code} vendor={ctx.info.get('GL_VENDOR')} renderer={ctx.info.get('GL_RENDERER')}")

    ctx.viewport = (0, 0, width, height)

    renderer = Renderer(ctx, width, height, build_scene(grid_extent, grid_step))
    cam = OrbitCamera(position, target, width / height)
    record = InputRecord(height)

    clock = pygame.time.Clock()
    running = True
    last_t = time.perf_counter()
    last_log = last_t
    last_hud = last_t

    pygame.font.init()
    font = pygame.font.SysFont("Menlo", 16) or pygame.font.Font(None, 16)
    fps_est = 0.0

    try:
        while running:
            now = time.perf_counter()
            dt = now - last_t
            last_t = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    w, h = max(64, event.w), max(64, event.h)
                    pygame.display.set_mode((w, h), flags)
                    renderer.resize(w, h)
                    record.resize(h)
                    cam.set_aspect(w / h)
                else:
                    record.handle_event(event)

            if record.take_reset():
                cam.set_transform(position, target)
            cam.update(record.take_motion())

            if dt > 0:
                inst_fps = 1.0 / dt
                fps_est = (0.9 * fps_est + 0.1 * inst_fps) if fps_est > 0 else inst_fps

            # Render
            renderer.begin_frame()
            renderer.set_camera(cam.get_view_matrix(), cam.get_proj_matrix())
            renderer.draw_scene()

            # HUD/logs
            if debug:
                if now - last_hud >= 0.12:
                    last_hud = now
                    lines = hud_lines(cam, fps_est)
                    pad = 6
                    line_h = font.get_linesize()
                    w = max(font.size(line)[0] for line in lines) + pad * 2
                    h = line_h * len(lines) + pad * 2
                    surf = pygame.Surface((w, h), pygame.SRCALPHA)
                    surf.fill((0, 0, 0, 130))
                    y = pad
                    for line in lines:
                        img = font.render(line, True, (255, 255, 255))
                        surf.blit(img, (pad, y))
                        y += line_h
                    rgba, tw, th = _surface_to_rgba_bytes(surf)
                    renderer.hud_update_rgba(rgba, tw, th)
                renderer.draw_hud()

                if now - last_log >= 1.0:
                    last_log = now
                    pos = cam.get_position()
                    tgt = cam.get_target()
                    print(f"[orbitcam] fps~{fps_est:.0f} eye=({pos[0]:.3f}, {pos[1]:.3f}, {pos[2]:.3f}) target=({tgt[0]:.3f}, {tgt[1]:.3f}, {tgt[2]:.3f})")

            pygame.display.flip()

            if FPS_CAP and FPS_CAP > 0:
                clock.tick(FPS_CAP)
            else:
                clock.tick()
    finally:
        cam.release()
        renderer.release()
        pygame.quit()
