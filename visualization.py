import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, **kwargs)
    else:
        ax.scatter(x, y, **kwargs)


def plot_maxima(points: list[Point], maxima: list[Point], ax: Axes | None = None):
    """
    Plot all points and the dominance staircase through the maximal ones.
    Every point below and to the left of the staircase is dominated.
    """
    if ax is None:
        ax = plt.gca()

    plot_points(points, ax=ax, c='b', s=4)
    if not maxima:
        return

    staircase = sorted(maxima, key=lambda p: (p.x, -p.y))
    xs, ys = [], []
    for pt in staircase:
        if xs:
            xs.append(xs[-1])
            ys.append(pt.y)
        xs.append(pt.x)
        ys.append(pt.y)
    ax.plot(xs, ys, c='r')
    plot_points(staircase, ax=ax, c='r', s=12)
    ax.grid()
