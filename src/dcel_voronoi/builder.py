from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import structlog
from scipy.optimize import linprog
from scipy.spatial import ConvexHull, HalfspaceIntersection

from .config import get_settings
from .dcel import DCEL
from .diagram import OutsideFaceStrategy, VoronoiDiagram, most_edges_face
from .geometry import Point, points_to_array

logger = structlog.get_logger()

Sites = Union[np.ndarray, Sequence[Point], Sequence[Tuple[float, float]]]


def as_site_array(sites: Sites, box_size: float) -> np.ndarray:
    if len(sites) and isinstance(sites[0], Point):
        S = points_to_array(sites)
    else:
        S = np.asarray(sites, dtype=np.float64)

    if S.ndim != 2 or S.shape[1] != 2:
        raise ValueError("sites must be (N,2)")
    if len(S) == 0:
        raise ValueError("at least one site is required")
    if not box_size > 0:
        raise ValueError("box_size must be > 0")
    if not np.all((S >= 0.0) & (S <= box_size)):
        raise ValueError(f"all sites must lie inside [0, {box_size}]^2")
    if len(np.unique(S, axis=0)) != len(S):
        raise ValueError("sites must be unique")
    return S


def _box_halfspaces(box_size: float) -> np.ndarray:
    L = float(box_size)
    # a*x + b*y + d <= 0
    hs = [
        [-1.0, 0.0, 0.0],
        [1.0, 0.0, -L],
        [0.0, -1.0, 0.0],
        [0.0, 1.0, -L],
    ]
    return np.asarray(hs, dtype=np.float64)


def _chebyshev_center(halfspaces: np.ndarray) -> np.ndarray:
    """
    Center of the largest disc inside the halfspace region (strictly feasible).
    maximize r  s.t.  A x + r * |A_i| <= -d
    """
    A = halfspaces[:, :-1]
    norm = np.linalg.norm(A, axis=1)
    c = np.zeros(A.shape[1] + 1)
    c[-1] = -1.0
    res = linprog(
        c,
        A_ub=np.hstack([A, norm[:, None]]),
        b_ub=-halfspaces[:, -1],
        bounds=(None, None),
    )
    if not res.success or res.x[-1] <= 0.0:
        raise RuntimeError(f"cell has no interior: {res.message}")
    return res.x[:-1]


def _cell_polygon(S: np.ndarray, i: int, box_size: float) -> np.ndarray:
    """
    Counter-clockwise outline of site i's cell inside the box:
    box halfspaces intersected with the bisector halfspace against every other site.
    """
    si = S[i]
    hs = [_box_halfspaces(box_size)]

    # bisectors: (sj - si)·x <= (sj - si)·m
    for j in range(len(S)):
        if j == i:
            continue
        n = S[j] - si
        m = 0.5 * (si + S[j])
        hs.append(np.array([n[0], n[1], -float(np.dot(n, m))], dtype=np.float64)[None, :])

    halfspaces = np.vstack(hs)

    # sites may sit on the box boundary, so the site itself is not a safe interior point
    hsi = HalfspaceIntersection(halfspaces, _chebyshev_center(halfspaces))
    V = np.asarray(hsi.intersections, dtype=np.float64)
    # 2-D hull vertices come out counter-clockwise, duplicates and collinear points dropped
    hull = ConvexHull(V)
    return V[hull.vertices]


def _drop_repeats(vidx: List[int]) -> List[int]:
    return [v for k, v in enumerate(vidx) if v != vidx[k - 1]]


def sweep_order(S: np.ndarray) -> np.ndarray:
    """Top to bottom (descending y), ties left to right."""
    return np.lexsort((S[:, 0], -S[:, 1]))


def build_dcel(
    sites: Sites,
    box_size: float,
    *,
    weld_decimals: Optional[int] = None,
) -> DCEL:
    """
    Bounded Voronoi subdivision of sites inside [0, box_size]^2 as a DCEL.

    Layout:
    - face 0 is the exterior; its cycle runs clockwise along the box
    - one face per site follows in sweep order, wound counter-clockwise,
      with Face.site set to the site's input index
    - every half-edge has a twin; cell boundary edges pair with exterior edges
    """
    S = as_site_array(sites, box_size)
    decimals = get_settings().weld_decimals if weld_decimals is None else int(weld_decimals)

    dcel = DCEL()
    vertex_map: Dict[Tuple[float, float], int] = {}

    def get_vertex_index(pt2) -> int:
        key = (round(float(pt2[0]), decimals), round(float(pt2[1]), decimals))
        if key not in vertex_map:
            vertex_map[key] = dcel.add_vertex(Point(key[0], key[1]))
        return vertex_map[key]

    outside = dcel.add_face()
    edge_map: Dict[Tuple[int, int], int] = {}  # (va, vb) -> half-edge id

    for i in sweep_order(S):
        coords = _cell_polygon(S, int(i), box_size)
        vidx = _drop_repeats([get_vertex_index(p) for p in coords])
        if len(vidx) < 3:
            raise RuntimeError(f"cell of site {int(i)} collapsed after welding")

        f = dcel.add_face(site=int(i))
        ids = [dcel.add_halfedge(v, face=f) for v in vidx]
        for a, b in zip(ids, ids[1:] + ids[:1]):
            dcel.link(a, b)
        dcel.faces[f].outer_component = ids[0]

        for h, edge in zip(ids, zip(vidx, vidx[1:] + vidx[:1])):
            if edge in edge_map:
                raise RuntimeError(f"edge {edge} is claimed by two cells")
            edge_map[edge] = h

    # pair interior edges, collect box edges
    border: Dict[int, Tuple[int, int]] = {}  # origin vertex -> (exterior half-edge, destination vertex)
    for (va, vb), h in edge_map.items():
        t = edge_map.get((vb, va))
        if t is not None:
            dcel.halfedges[h].twin = t
            continue
        o = dcel.add_halfedge(vb, face=outside)
        dcel.set_twins(h, o)
        if vb in border:
            raise RuntimeError(f"vertex welding left a pinched boundary at {dcel.vertices[vb].point}")
        border[vb] = (o, va)

    for o, dest in border.values():
        if dest not in border:
            raise RuntimeError(f"vertex welding left an open boundary at {dcel.vertices[dest].point}")
        dcel.link(o, border[dest][0])

    first = next(iter(border.values()))[0]
    dcel.faces[outside].outer_component = first
    if dcel.cycle_length(first) != len(border):
        raise RuntimeError("exterior boundary splits into several cycles")

    logger.debug(
        "dcel built",
        sites=len(S),
        faces=len(dcel.faces),
        halfedges=len(dcel.halfedges),
        vertices=len(dcel.vertices),
    )
    return dcel


def voronoi(
    sites: Sites,
    box_size: float,
    *,
    outside_face: OutsideFaceStrategy = most_edges_face,
    weld_decimals: Optional[int] = None,
) -> VoronoiDiagram:
    dcel = build_dcel(sites, box_size, weld_decimals=weld_decimals)
    return VoronoiDiagram.from_dcel(dcel, outside_face=outside_face)
