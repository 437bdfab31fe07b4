import logging
from typing import Optional

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def plot_hull(points, hull=None, title: str = "Convex Hull",
              output: Optional[str] = None, show: bool = True):
    """
    Plot a point set and, optionally, its hull.

    Parameters:
    points (PointSet): the points to scatter.
    hull (Hull, optional): hull to draw as a closed polygon over its own point set.
    output (str, optional): save the figure to this path.
    show (bool): open a window with the figure.
    """
    if points is None or len(points) == 0:
        raise ValueError("No points to plot")

    xy = points.active
    fig, ax = plt.subplots()
    ax.scatter(xy[:, 0], xy[:, 1], color='blue', s=12, label='points')

    if hull is not None and hull.num_lines > 0:
        # Close the polygon by repeating the first vertex
        cycle = hull.vertex_coords()
        ax.scatter(cycle[:, 0], cycle[:, 1], color='red', marker='x', label='hull vertices')
        ax.plot(list(cycle[:, 0]) + [cycle[0, 0]], list(cycle[:, 1]) + [cycle[0, 1]],
                color='red', label='hull edges')

    ax.set_title(title)
    ax.set_xlabel('X-Axis')
    ax.set_ylabel('Y-Axis')
    ax.set_aspect('equal')
    ax.legend(loc='upper right')
    ax.grid(True)

    if output:
        fig.savefig(output)
        logger.info("Saved plot to %s", output)
    if show:
        plt.show()
    return fig
