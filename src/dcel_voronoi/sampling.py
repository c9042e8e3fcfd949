import numpy as np

from .geometry import Rect


def sample_sites_in_rect(
    rect: Rect,
    *,
    target_area: float | None = None,
    n_points: int | None = None,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Uniform sites strictly inside rect (boundary excluded, see Rect.contains).
    Either n_points or target_area (area per site) is required.
    """
    area = max(rect.width, 0.0) * max(rect.height, 0.0)
    if area <= 0.0:
        raise ValueError("rect must have positive area")

    if n_points is None:
        if target_area is None:
            raise ValueError("Either target_area or n_points required")
        n_points = max(1, int(area / target_area))

    points = np.zeros((0, 2), dtype=np.float64)
    while len(points) < n_points:
        k = n_points - len(points)
        P = np.column_stack([
            rng.uniform(rect.left, rect.right, k),
            rng.uniform(rect.top, rect.bottom, k),
        ])
        points = np.vstack([points, P[rect.contains(P)]])

    return points[:n_points]
