import logging

from geometry import Number, Point
from util import timeit

logger = logging.getLogger(__name__)


class MaximaFinder:
    def __init__(self):
        self.tree_height: int = 0
        self.points: list[Point] = []

    def right_peaks(self, start: int, end: int) -> tuple[Number, Number | None]:
        """
        Scan points[start..end] and return two y peaks:
        the highest y over the whole range, and the highest y over points
        whose x is strictly greater than the smallest x of the range
        (None if every point of the range shares that x).
        """
        min_x = self.points[start].x
        peak_y = self.points[start].y
        peak_y_past_tie = None
        for i in range(start + 1, end + 1):
            p = self.points[i]
            if p.y > peak_y:
                peak_y = p.y
            if p.x > min_x and (peak_y_past_tie is None or p.y > peak_y_past_tie):
                peak_y_past_tie = p.y
        return peak_y, peak_y_past_tie

    def combine(self, maxima_left: list[Point], maxima_right: list[Point], mid: int, end: int) -> list[Point]:
        """
        Merge maxima of the halves [start, mid] and [mid + 1, end].

        No left point can dominate a right point, since its x is not greater.
        A left maximum p is dominated iff some right point q has
        q.x > p.x and q.y > p.y. Left points with x below the right range
        are checked against the peak of the whole right range, a left point
        sharing x with the first right points is checked only against
        right points past that x.
        """
        peak_y, peak_y_past_tie = self.right_peaks(mid + 1, end)
        right_min_x = self.points[mid + 1].x

        maxima = list(maxima_right)
        for p in maxima_left:
            threshold = peak_y if p.x < right_min_x else peak_y_past_tie
            if threshold is None or p.y >= threshold:
                maxima.append(p)
        return maxima

    def solve(self, start: int, end: int, level: int = 0) -> list[Point]:
        """
        Find maxima of points[start..end] (inclusive) recursively
        using divide and conquer strategy. Assuming points are sorted by x.

        Time complexity: O(n*log(n))
        """
        self.tree_height = max(self.tree_height, level)

        if start == end:
            return [self.points[start]]

        mid = start + (end - start) // 2
        maxima_left = self.solve(start, mid, level=level + 1)
        maxima_right = self.solve(mid + 1, end, level=level + 1)

        return self.combine(maxima_left, maxima_right, mid, end)

    @timeit
    def find_maxima(self, points: list[Point]) -> list[Point]:
        """
        Compute all points not dominated by any other point of a given multiset.
        The input sequence is left untouched.
        """
        self.tree_height = 0
        if len(points) == 0:
            return []

        self.points = sorted(points, key=lambda p: p.x)
        maxima = self.solve(0, len(self.points) - 1)
        logger.debug(
            "%d maxima out of %d points, recursion depth %d",
            len(maxima), len(self.points), self.tree_height,
        )
        self.points = []
        return maxima


def find_maxima(points: list[Point]) -> list[Point]:
    return MaximaFinder().find_maxima(points)
