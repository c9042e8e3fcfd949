from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

import numpy as np
import structlog
import trimesh
from shapely.geometry import Polygon

from .dcel import DCEL
from .geometry import Point, points_to_array, signed_area, vertex_mean

logger = structlog.get_logger()

# Picks the face id treated as the unbounded exterior.
OutsideFaceStrategy = Callable[[DCEL], int]


def most_edges_face(dcel: DCEL) -> int:
    """
    The live face with the most boundary edges; ties keep the lowest index.

    Once the diagram is clipped by a large box the exterior usually has the
    longest boundary. This is a heuristic and can pick a real cell for
    diagrams with very few sites. With no live faces the result is 0, even
    if face 0 is dead or missing.
    """
    highest_edges_count = 0
    highest_edges_face = 0
    for i, face in dcel.live_faces():
        num_edges = dcel.cycle_length(face.outer_component)
        if num_edges > highest_edges_count:
            highest_edges_count = num_edges
            highest_edges_face = i
    return highest_edges_face


def clockwise_face(dcel: DCEL) -> int:
    """
    First live face whose boundary winds clockwise. In a subdivision whose
    cells are counter-clockwise this is the exterior. 0 when none is found.
    """
    for i, face in dcel.live_faces():
        pts = [dcel.get_origin(h) for h in dcel.cycle(face.outer_component)]
        if signed_area(pts) < 0.0:
            return i
    return 0


def fixed_face(face_id: int) -> OutsideFaceStrategy:
    """Use a face id already known to the builder."""
    def strategy(dcel: DCEL) -> int:
        return face_id
    return strategy


class VoronoiDiagram:
    """
    Queryable view over a finished DCEL.

    The diagram takes the DCEL as-is (no copy) and does not modify it; callers
    should not keep mutating the DCEL afterwards. outside_face_id is resolved
    once here and never recomputed.
    """

    def __init__(self, dcel: DCEL, outside_face_id: int):
        self._dcel = dcel
        self._outside_face_id = int(outside_face_id)

    @classmethod
    def from_dcel(
        cls,
        dcel: DCEL,
        outside_face: OutsideFaceStrategy = most_edges_face,
    ) -> "VoronoiDiagram":
        outside_face_id = outside_face(dcel)
        logger.debug(
            "outside face selected",
            outside_face_id=outside_face_id,
            strategy=getattr(outside_face, "__name__", repr(outside_face)),
            faces=len(dcel.faces),
        )
        return cls(dcel, outside_face_id)

    @property
    def dcel(self) -> DCEL:
        return self._dcel

    @property
    def outside_face_id(self) -> int:
        return self._outside_face_id

    def cells(self) -> "VoronoiCellsIterator":
        return VoronoiCellsIterator(self)

    def to_trimesh(self) -> trimesh.Trimesh:
        """
        Flat (z=0) triangle mesh of all cells, fan triangulated.
        Cells are assumed convex.
        """
        verts = []
        tri_faces = []
        for cell in self.cells():
            P = cell.points_array()
            if len(P) < 3:
                continue
            base = len(verts)
            verts.extend(P.tolist())
            for k in range(1, len(P) - 1):
                tri_faces.append([base, base + k, base + k + 1])

        if len(tri_faces) == 0:
            return trimesh.Trimesh(vertices=np.zeros((0, 3)), faces=np.zeros((0, 3), dtype=int), process=False)

        V = np.column_stack([np.asarray(verts, dtype=np.float64), np.zeros(len(verts))])
        return trimesh.Trimesh(vertices=V, faces=np.asarray(tri_faces, dtype=int), process=False)


@dataclass(frozen=True)
class VoronoiCell:
    """
    Handle to one face of a diagram. Holds no geometry of its own; every call
    reads through the diagram's DCEL.
    """
    diagram: VoronoiDiagram
    face_id: int

    @property
    def site_index(self) -> Optional[int]:
        return self.diagram.dcel.faces[self.face_id].site

    def points(self) -> List[Point]:
        """Boundary vertices in cycle order, first point not repeated."""
        return self.diagram.dcel.face_points(self.face_id)

    def centroid(self) -> Point:
        """Mean of the boundary vertices (not area weighted)."""
        return vertex_mean(self.points())

    def points_array(self) -> np.ndarray:
        return points_to_array(self.points())

    def polygon(self) -> Polygon:
        return Polygon(self.points_array())


class VoronoiCellsIterator:
    """
    Single pass over the face table in index order, skipping dead faces and
    the outside face.
    """

    def __init__(self, diagram: VoronoiDiagram):
        self._diagram = diagram
        self._faces: Iterator = diagram.dcel.live_faces()

    def __iter__(self) -> "VoronoiCellsIterator":
        return self

    def __next__(self) -> VoronoiCell:
        for i, _face in self._faces:
            if i != self._diagram.outside_face_id:
                return VoronoiCell(self._diagram, i)
        raise StopIteration
