import argparse
import logging
import time

import matplotlib.pyplot as plt

from geometry import Point, format_points, generate_points, load_points, save_points
from maxima_naive import NaiveMaximaFinder
from maxima_tree import MaximaFinder
from visualization import plot_maxima

logger = logging.getLogger(__name__)

ALGORITHMS = {
    "tree": MaximaFinder,
    "naive": NaiveMaximaFinder,
}

DISTRIBUTIONS = ["uniform", "uniform_int", "gaussian", "anticorrelated"]

EXAMPLE_POINTS = [
    Point(1, 8), Point(2, 5), Point(3, 9), Point(4, 7),
    Point(5, 3), Point(6, 6), Point(7, 2), Point(8, 4),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("2-D maxima finder")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", type=str, help="file with a point count followed by `x y` lines")
    source.add_argument("--generate", type=int, metavar="N", help="generate N random points")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--save", type=str, help="write the maximal points to a file")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="tree")
    parser.add_argument("--plot", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    return parser


def read_points(parser: argparse.ArgumentParser, args: argparse.Namespace) -> list[Point]:
    if args.input:
        try:
            return load_points(args.input)
        except (OSError, ValueError) as e:
            parser.error(f"Failed to load {args.input}: {e}")
    if args.generate is not None:
        if args.generate < 0:
            parser.error("--generate expects a non-negative number of points")
        return generate_points(args.generate, args.distribution, args.seed)
    return list(EXAMPLE_POINTS)


def main(argv: list[str] | None = None) -> list[Point]:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    points = read_points(parser, args)
    print("Original points:")
    print(format_points(points))

    finder = ALGORITHMS[args.algorithm]()
    start = time.perf_counter()
    maxima = finder.find_maxima(points)
    execution_time = time.perf_counter() - start
    logger.info("%s found %d maxima among %d points in %.6f sec",
                args.algorithm, len(maxima), len(points), execution_time)

    print("\nMaximal points found:")
    print(format_points(maxima))

    if args.save:
        save_points(args.save, maxima)
        logger.info("Saved maxima to %s", args.save)

    if args.plot:
        plot_maxima(points, maxima)
        plt.show()

    return maxima


if __name__ == "__main__":
    main()
