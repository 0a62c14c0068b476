"""Batched world-to-screen projection, JIT-compiled with Numba."""

import numpy as np
from numba import njit, prange


@njit(parallel=True, cache=True)
def project_points_numba(
    points: np.ndarray,
    target: np.ndarray,
    cos_az: float,
    sin_az: float,
    cos_el: float,
    sin_el: float,
    distance: float,
    focal_length: float,
    half_width: float,
    half_height: float,
    out: np.ndarray,
    visible: np.ndarray,
    num_points: int
):
    """
    Same arithmetic as Camera.project, one row per point.

    out columns: screen_x, screen_y, scale, depth. Clipped rows are
    flagged False in ``visible`` and their ``out`` row is left untouched.
    """
    for i in prange(num_points):
        px = points[i, 0] - target[0]
        py = points[i, 1] - target[1]
        pz = points[i, 2] - target[2]

        x1 = px * cos_az - pz * sin_az
        z1 = px * sin_az + pz * cos_az

        y2 = py * cos_el - z1 * sin_el
        z2 = py * sin_el + z1 * cos_el

        depth = z2 - distance
        if depth >= -focal_length:
            visible[i] = False
            continue

        scale = focal_length / -depth
        out[i, 0] = x1 * scale + half_width
        out[i, 1] = y2 * scale + half_height
        out[i, 2] = scale
        out[i, 3] = depth
        visible[i] = True


def project_points(camera, points: np.ndarray, width: float, height: float):
    """
    Project an (n, 3) array of world points through ``camera``.

    Returns:
        (out, visible): an (n, 4) float64 array and an (n,) bool mask
    """
    points = np.ascontiguousarray(points, dtype=np.float64).reshape(-1, 3)
    n = points.shape[0]
    out = np.zeros((n, 4), dtype=np.float64)
    visible = np.zeros(n, dtype=np.bool_)
    if n == 0:
        return out, visible

    cos_az, sin_az, cos_el, sin_el = camera.rotation()
    project_points_numba(
        points,
        camera.target.as_array(),
        cos_az,
        sin_az,
        cos_el,
        sin_el,
        float(camera.distance),
        float(camera.focal_length),
        width / 2,
        height / 2,
        out,
        visible,
        n
    )
    return out, visible


def project_segments(camera, starts: np.ndarray, ends: np.ndarray, width: float, height: float):
    """
    Project line segments, keeping only those with both ends visible.

    Returns:
        (m, 2, 4) array of projected endpoint pairs
    """
    starts = np.asarray(starts, dtype=np.float64).reshape(-1, 3)
    ends = np.asarray(ends, dtype=np.float64).reshape(-1, 3)
    n = starts.shape[0]
    out, visible = project_points(camera, np.concatenate([starts, ends]), width, height)
    keep = visible[:n] & visible[n:]
    return np.stack([out[:n][keep], out[n:][keep]], axis=1)
