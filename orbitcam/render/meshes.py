from __future__ import annotations

import numpy as np

# Vertex layout: interleaved float32 (pos.xyz, color.rgb), two vertices per line.
FLOATS_PER_VERTEX = 6


def _lines(segments: list[tuple[tuple[float, float, float], tuple[float, float, float]]], color) -> np.ndarray:
    out = np.empty((len(segments) * 2, FLOATS_PER_VERTEX), dtype=np.float32)
    for i, (a, b) in enumerate(segments):
        out[2 * i, :3] = a
        out[2 * i + 1, :3] = b
    out[:, 3:] = color
    return out


def build_grid_lines(extent: float, step: float, color) -> np.ndarray:
    """Square grid in the XZ plane covering [-extent, extent] on both axes."""
    assert step > 0.0 and extent > 0.0
    n = int(np.floor(extent / step + 1e-6))
    segments = []
    for k in range(-n, n + 1):
        c = k * step
        segments.append(((c, 0.0, -extent), (c, 0.0, extent)))
        segments.append(((-extent, 0.0, c), (extent, 0.0, c)))
    return _lines(segments, color)


def build_axes_lines(length: float, colors) -> np.ndarray:
    """Three unit axes from the origin, slightly lifted to sit above the grid."""
    lift = 1e-3
    axes = [
        _lines([((0.0, lift, 0.0), (length, lift, 0.0))], colors[0]),
        _lines([((0.0, lift, 0.0), (0.0, length + lift, 0.0))], colors[1]),
        _lines([((0.0, lift, 0.0), (0.0, lift, length))], colors[2]),
    ]
    return np.concatenate(axes, axis=0)


def build_cube_lines(center, size: float, color) -> np.ndarray:
    """Twelve edges of an axis-aligned cube."""
    cx, cy, cz = (float(c) for c in center)
    h = float(size) * 0.5
    corners = [
        (cx + sx * h, cy + sy * h, cz + sz * h)
        for sx in (-1.0, 1.0) for sy in (-1.0, 1.0) for sz in (-1.0, 1.0)
    ]
    segments = []
    for i in range(8):
        for j in range(i + 1, 8):
            # Corners sharing two coordinates form an edge.
            diff = sum(1 for a, b in zip(corners[i], corners[j]) if a != b)
            if diff == 1:
                segments.append((corners[i], corners[j]))
    return _lines(segments, color)
