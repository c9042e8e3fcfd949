import numpy as np
import structlog

from .builder import Sites, as_site_array, voronoi

logger = structlog.get_logger()


def lloyd_relaxation(sites: Sites, box_size: float, *, iterations: int = 1) -> np.ndarray:
    """Apply Lloyd's relaxation to spread sites more evenly.

    Each iteration builds the bounded diagram and moves every site to the
    centroid() of its cell (vertex mean, see VoronoiCell.centroid).

    Args:
        sites: (N,2) array or sequence of Point
        box_size: Side of the square [0, box_size]^2
        iterations: Number of relaxation passes

    Returns:
        (N,2) relaxed sites, same order as the input
    """
    if iterations < 0:
        raise ValueError("iterations must be >= 0")

    points = as_site_array(sites, box_size).copy()

    for iteration in range(iterations):
        diagram = voronoi(points, box_size)
        relaxed = points.copy()
        for cell in diagram.cells():
            c = cell.centroid()
            relaxed[cell.site_index] = (c.x, c.y)
        points = relaxed
        logger.info("relaxation iteration complete", iteration=iteration + 1, sites=len(points))

    return points
