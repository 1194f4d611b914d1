from geometry import Point, dominates


class NaiveMaximaFinder:
    def find_maxima(self, points: list[Point]) -> list[Point]:
        return [
            p for p in points
            if not any(dominates(q, p) for q in points)
        ]
