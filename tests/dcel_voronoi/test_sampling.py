import numpy as np
import pytest
from dcel_voronoi.geometry import Point, Rect
from dcel_voronoi.sampling import sample_sites_in_rect


def test_sampling_points_strictly_inside_rect():
    rng = np.random.default_rng(123)
    rect = Rect(left=0.0, top=0.0, right=10.0, bottom=10.0)
    pts = sample_sites_in_rect(rect, n_points=100, rng=rng)

    assert pts.shape == (100, 2)
    for p in pts:
        assert rect.contains_point(Point(float(p[0]), float(p[1])))


def test_sampling_count_from_target_area():
    rng = np.random.default_rng(0)
    rect = Rect(left=0.0, top=0.0, right=10.0, bottom=10.0)  # area=100
    pts = sample_sites_in_rect(rect, target_area=25.0, rng=rng)
    # int(100/25)=4
    assert len(pts) == 4


def test_sampling_is_deterministic_with_seed():
    rect = Rect(left=5.0, top=-5.0, right=15.0, bottom=5.0)

    a = sample_sites_in_rect(rect, n_points=20, rng=np.random.default_rng(999))
    b = sample_sites_in_rect(rect, n_points=20, rng=np.random.default_rng(999))

    assert np.allclose(a, b)


def test_sampling_requires_a_count():
    rect = Rect(left=0.0, top=0.0, right=10.0, bottom=10.0)
    with pytest.raises(ValueError):
        sample_sites_in_rect(rect, rng=np.random.default_rng(0))


def test_sampling_rejects_empty_rect():
    rect = Rect(left=10.0, top=0.0, right=0.0, bottom=10.0)
    with pytest.raises(ValueError):
        sample_sites_in_rect(rect, n_points=3, rng=np.random.default_rng(0))
