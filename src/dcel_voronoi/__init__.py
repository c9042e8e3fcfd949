from .geometry import Point, Rect, vertex_mean, signed_area
from .dcel import DCEL, Face, HalfEdge, Vertex, DCELCorruptionError
from .diagram import (
    VoronoiDiagram,
    VoronoiCell,
    VoronoiCellsIterator,
    OutsideFaceStrategy,
    most_edges_face,
    clockwise_face,
    fixed_face,
)
from .builder import build_dcel, voronoi
from .relaxation import lloyd_relaxation
from .sampling import sample_sites_in_rect
from .config import Settings, get_settings
from .log import configure_logging

__all__ = [
    "Point",
    "Rect",
    "vertex_mean",
    "signed_area",
    "DCEL",
    "Face",
    "HalfEdge",
    "Vertex",
    "DCELCorruptionError",
    "VoronoiDiagram",
    "VoronoiCell",
    "VoronoiCellsIterator",
    "OutsideFaceStrategy",
    "most_edges_face",
    "clockwise_face",
    "fixed_face",
    "build_dcel",
    "voronoi",
    "lloyd_relaxation",
    "sample_sites_in_rect",
    "Settings",
    "get_settings",
    "configure_logging",
]
