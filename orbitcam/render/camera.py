from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from orbitcam.config import DOLLY_BASE, EPSILON, FAR, FOVY_DEG, NEAR, WORLD_UP
from orbitcam.util.math import clamp, look_at, normalize, perspective

_WORLD_UP = np.array(WORLD_UP, dtype=np.float64)

# Numeric range the radius saturates to. The upper bound keeps the float32
# matrices finite, the lower one keeps squared components from underflowing.
_MAX_RADIUS = float(np.finfo(np.float32).max) / 4.0
_MIN_RADIUS = 1e-150


@dataclass
class Motion:
    """Per-frame camera input.

    pan:   screen-space pan (fraction of the view height)
    orbit: azimuth/polar rotation (fraction of a full turn)
    dolly: zoom steps, positive moves away from the target
    """

    pan: tuple[float, float] = (0.0, 0.0)
    orbit: tuple[float, float] = (0.0, 0.0)
    dolly: float = 0.0


def _vec3(v) -> np.ndarray:
    return np.array([float(v[0]), float(v[1]), float(v[2])], dtype=np.float64)


def _calculate_pan(from_camera: np.ndarray, motion: Motion) -> np.ndarray:
    forward = normalize(from_camera)
    left = np.cross(_WORLD_UP, forward)
    up = np.cross(forward, left)

    # Scale by the visible frame height at the target distance.
    distance = math.hypot(*from_camera)
    factor = distance * math.tan(math.radians(FOVY_DEG) / 2.0) * 2.0
    delta_x = left * (float(motion.pan[0]) * factor)
    delta_y = up * (float(motion.pan[1]) * factor)
    return delta_x + delta_y


def _scale_radius(radius: float, dolly: float) -> float:
    """Apply ``DOLLY_BASE ** dolly``, saturating at the representable radius range."""
    log_base = math.log(DOLLY_BASE)
    lo = math.log(_MAX_RADIUS / radius) / log_base
    hi = math.log(_MIN_RADIUS / radius) / log_base
    return radius * DOLLY_BASE ** clamp(float(dolly), lo, hi)


def _calculate_offset(from_target: np.ndarray, motion: Motion) -> np.ndarray:
    """New eye offset from the target."""
    x, y, z = (float(c) for c in from_target)
    radius = math.hypot(x, y, z)
    theta = math.atan2(x, z)  # azimuth, from +Z toward +X
    phi = math.acos(clamp(y / radius, -1.0, 1.0))  # polar, from +Y
    turn = math.pi * 2.0

    radius = _scale_radius(radius, motion.dolly)
    theta -= float(motion.orbit[0]) * turn
    phi -= float(motion.orbit[1]) * turn
    phi = clamp(phi, EPSILON, math.pi - EPSILON)

    return np.array([
        radius * math.sin(phi) * math.sin(theta),
        radius * math.cos(phi),
        radius * math.sin(phi) * math.cos(theta),
    ], dtype=np.float64)


def _distance(a: np.ndarray, b: np.ndarray) -> float:
    return math.hypot(*(a - b))


def _check_pose(position: np.ndarray, target: np.ndarray) -> None:
    assert _distance(position, target) > EPSILON, "camera position and target coincide"


class OrbitCamera:
    """Camera orbiting a look-at target.

    The pose is stored in float64, the precision the spherical update runs
    in; matrices are cast to float32 for the GPU. The camera is owned by its
    creator and must be released exactly once.
    """

    def __init__(self, position, target, aspect: float) -> None:
        self._position = _vec3(position)
        self._target = _vec3(target)
        _check_pose(self._position, self._target)
        assert float(aspect) > 0.0, "aspect must be positive"
        self._aspect = float(aspect)
        self._released = False

    def _check_alive(self) -> None:
        assert not self._released, "camera used after release"

    def release(self) -> None:
        self._check_alive()
        self._released = True

    @property
    def aspect(self) -> float:
        return self._aspect

    def set_aspect(self, aspect: float) -> None:
        self._check_alive()
        assert float(aspect) > 0.0, "aspect must be positive"
        self._aspect = float(aspect)

    def set_transform(self, position, target) -> None:
        self._check_alive()
        position = _vec3(position)
        target = _vec3(target)
        _check_pose(position, target)
        self._position = position
        self._target = target

    def update(self, motion: Motion) -> None:
        self._check_alive()
        from_target = self._position - self._target
        from_camera = self._target - self._position
        pan = _calculate_pan(from_camera, motion)
        offset = _calculate_offset(from_target, motion)
        # Pan moves the whole rig: the eye is rebuilt around the new target.
        target = self._target + pan
        position = target + offset
        if _distance(position, target) <= 0.0:
            # The offset rounded away next to the target: keep the current radius.
            position = target + _calculate_offset(from_target, Motion(orbit=motion.orbit))
            if _distance(position, target) <= 0.0:
                return
        self._target = target
        self._position = position

    # --- Properties ---
    def get_position(self) -> np.ndarray:
        self._check_alive()
        return self._position.copy()

    def get_target(self) -> np.ndarray:
        self._check_alive()
        return self._target.copy()

    def get_forward(self) -> np.ndarray:
        self._check_alive()
        assert _distance(self._target, self._position) > 0.0, "camera position and target coincide"
        return normalize(self._target - self._position)

    def get_view_matrix(self) -> np.ndarray:
        self._check_alive()
        return look_at(self._position, self._target, _WORLD_UP)

    def get_proj_matrix(self) -> np.ndarray:
        self._check_alive()
        return perspective(FOVY_DEG, self._aspect, NEAR, FAR)
