"""
Half-edge planar subdivision (doubly connected edge list).

Faces, half-edges and vertices live in flat lists and refer to each other by
index. Faces are never removed from storage: remove_face() only clears the
``alive`` flag, so every index handed out stays valid. Consumers filter
through live_faces() instead of checking the flag themselves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .config import get_settings
from .geometry import Point

NIL = -1


class DCELCorruptionError(RuntimeError):
    """A half-edge cycle is unlinked or never returns to its start."""


@dataclass
class Vertex:
    point: Point
    incident_edge: int = NIL


@dataclass
class HalfEdge:
    origin: int  # vertex index
    next: int = NIL
    prev: int = NIL
    twin: int = NIL
    face: int = NIL


@dataclass
class Face:
    outer_component: int = NIL
    alive: bool = True
    site: Optional[int] = None  # input site index, None for the outside face


class DCEL:
    def __init__(self):
        self.vertices: List[Vertex] = []
        self.halfedges: List[HalfEdge] = []
        self.faces: List[Face] = []

    # ---------- construction ----------

    def add_vertex(self, point: Point) -> int:
        self.vertices.append(Vertex(point))
        return len(self.vertices) - 1

    def add_halfedge(self, origin: int, face: int = NIL) -> int:
        self.halfedges.append(HalfEdge(origin=origin, face=face))
        h = len(self.halfedges) - 1
        if self.vertices[origin].incident_edge == NIL:
            self.vertices[origin].incident_edge = h
        return h

    def add_face(self, outer_component: int = NIL, site: Optional[int] = None) -> int:
        self.faces.append(Face(outer_component=outer_component, site=site))
        return len(self.faces) - 1

    def link(self, a: int, b: int) -> None:
        """a.next = b, b.prev = a"""
        self.halfedges[a].next = b
        self.halfedges[b].prev = a

    def set_twins(self, a: int, b: int) -> None:
        self.halfedges[a].twin = b
        self.halfedges[b].twin = a

    def remove_face(self, face_id: int) -> None:
        self.faces[face_id].alive = False

    # ---------- queries ----------

    def get_origin(self, halfedge_id: int) -> Point:
        return self.vertices[self.halfedges[halfedge_id].origin].point

    def live_faces(self) -> Iterator[Tuple[int, Face]]:
        for i, face in enumerate(self.faces):
            if face.alive:
                yield i, face

    def cycle(self, start: int, *, max_length: Optional[int] = None) -> Iterator[int]:
        """
        Yield half-edge ids along ``next`` from start until start recurs.

        Raises DCELCorruptionError when an unlinked half-edge is reached or when
        more than max_length edges are walked (default: settings.max_cycle_length,
        0 walks without a cap).
        """
        limit = get_settings().max_cycle_length if max_length is None else max_length
        current = start
        steps = 0
        while True:
            if current < 0 or current >= len(self.halfedges):
                raise DCELCorruptionError(f"half-edge cycle from {start} reached invalid id {current}")
            yield current
            steps += 1
            current = self.halfedges[current].next
            if current == start:
                return
            if limit and steps >= limit:
                raise DCELCorruptionError(
                    f"half-edge cycle from {start} did not close after {steps} edges"
                )

    def cycle_length(self, start: int, *, max_length: Optional[int] = None) -> int:
        return sum(1 for _ in self.cycle(start, max_length=max_length))

    def face_points(self, face_id: int, *, max_length: Optional[int] = None) -> List[Point]:
        start = self.faces[face_id].outer_component
        return [self.get_origin(h) for h in self.cycle(start, max_length=max_length)]
