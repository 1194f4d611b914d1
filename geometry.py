import numpy as np

from dataclasses import dataclass

Number = int | float


@dataclass(frozen=True)
class Point:
    x: Number
    y: Number

    def __str__(self):
        return f'({self.x}, {self.y})'


def dominates(a: Point, b: Point) -> bool:
    """
    Point a dominates point b if it is strictly greater in both coordinates.
    """
    return a.x > b.x and a.y > b.y


def format_points(points: list[Point]) -> str:
    return ' '.join(str(p) for p in points)


def parse_coordinate(token: str) -> Number:
    try:
        return int(token)
    except ValueError:
        return float(token)


def load_points(filename: str) -> list[Point]:
    """
    Read points from a text file: the first line holds the number of points n,
    each of the next n lines holds a pair `x y`.
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        n = int(f.readline().strip())
        for line in f:
            line = line.strip()
            if not line:
                continue
            tokens = line.split()
            if len(tokens) != 2:
                raise ValueError(f'Expected "x y", got {line!r}')
            x, y = map(parse_coordinate, tokens)
            points.append(Point(x, y))

    if len(points) != n:
        raise ValueError(f'Header declares {n} points, file has {len(points)}')
    return points


def save_points(filename: str, points: list[Point]):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f'{len(points)}\n')
        for p in points:
            f.write(f'{p.x} {p.y}\n')


def generate_points(n: int, distribution: str = 'uniform', seed: int | None = None) -> list[Point]:
    """
    Generate n random points.
    `anticorrelated` places points near the line x + y = 1000,
    so a large share of them ends up maximal.
    """
    rng = np.random.default_rng(seed)

    if distribution == 'uniform':
        xs = rng.uniform(0, 1000, n)
        ys = rng.uniform(0, 1000, n)
    elif distribution == 'uniform_int':
        xs = rng.integers(0, 100, n)
        ys = rng.integers(0, 100, n)
    elif distribution == 'gaussian':
        xs = rng.normal(500, 150, n)
        ys = rng.normal(500, 150, n)
    elif distribution == 'anticorrelated':
        xs = rng.uniform(0, 1000, n)
        ys = 1000 - xs + rng.normal(0, 20, n)
    else:
        raise ValueError(f'Unknown distribution: {distribution}')

    return [Point(x.item(), y.item()) for x, y in zip(xs, ys)]
