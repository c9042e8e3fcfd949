import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from dcel_voronoi.builder import voronoi
from dcel_voronoi.visualize import plot_diagram


SITES = [(0.0, 1.0), (2.0, 3.0), (10.0, 12.0)]


def test_plot_draws_closed_outline_and_centroid_per_cell():
    d = voronoi(SITES, 800.0)
    ax = plot_diagram(d)

    assert len(ax.lines) == 2 * 3
    outline = ax.lines[0].get_xydata()
    assert (outline[0] == outline[-1]).all()
    assert len(outline) == len(next(d.cells()).points()) + 1
    plt.close(ax.figure)


def test_plot_without_centroids_on_given_axes():
    d = voronoi(SITES, 800.0)
    fig, ax = plt.subplots()

    out = plot_diagram(d, ax=ax, show_centroids=False)

    assert out is ax
    assert len(ax.lines) == 3
    plt.close(fig)
