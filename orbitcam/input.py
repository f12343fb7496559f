from __future__ import annotations

import pygame

from orbitcam.render.camera import Motion

_BUTTON_ORBIT = 1  # left
_BUTTON_PAN = 3  # right


class InputRecord:
    """Accumulates pygame events between frames and turns them into a Motion.

    Cursor deltas are divided by the window height so a drag across the full
    view covers the same fraction regardless of window size.
    """

    def __init__(self, window_height: int) -> None:
        self.window_height = max(1, int(window_height))

        self.is_orbiting = False
        self.is_panning = False
        self.reset_requested = False

        self._orbit = [0.0, 0.0]
        self._pan = [0.0, 0.0]
        self._dolly = 0.0

    def resize(self, window_height: int) -> None:
        self.window_height = max(1, int(window_height))

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == _BUTTON_ORBIT:
                self.is_orbiting = True
            elif event.button == _BUTTON_PAN:
                self.is_panning = True
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == _BUTTON_ORBIT:
                self.is_orbiting = False
            elif event.button == _BUTTON_PAN:
                self.is_panning = False
        elif event.type == pygame.MOUSEMOTION:
            dx = float(event.rel[0]) / self.window_height
            dy = float(event.rel[1]) / self.window_height
            if self.is_orbiting:
                self._orbit[0] += dx
                self._orbit[1] += dy
            if self.is_panning:
                self._pan[0] += dx
                self._pan[1] += dy
        elif event.type == pygame.MOUSEWHEEL:
            # Scrolling up zooms in.
            self._dolly -= float(event.y)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            self.reset_requested = True

    def take_motion(self) -> Motion:
        """Return the motion accumulated since the last call and clear it."""
        motion = Motion(
            pan=(self._pan[0], self._pan[1]),
            orbit=(self._orbit[0], self._orbit[1]),
            dolly=self._dolly,
        )
        self._orbit = [0.0, 0.0]
        self._pan = [0.0, 0.0]
        self._dolly = 0.0
        return motion

    def take_reset(self) -> bool:
        requested = self.reset_requested
        self.reset_requested = False
        return requested
