import matplotlib.pyplot as plt


def plot_diagram(diagram, ax=None, show_centroids: bool = True):
    if ax is None:
        fig, ax = plt.subplots()

    for cell in diagram.cells():
        p = cell.points_array()
        closed = p[list(range(len(p))) + [0]]
        ax.plot(*closed.T, "-k")
        if show_centroids:
            c = cell.centroid()
            ax.plot(c.x, c.y, ".r")

    ax.set_aspect("equal")
    ax.set_title("Voronoi cells")
    return ax
