import matplotlib
import pytest

matplotlib.use("Agg")

from geometry import Point, load_points, save_points
from program import main


def test_example_run(capsys):
    maxima = main([])
    assert set(maxima) == {Point(3, 9), Point(4, 7), Point(6, 6), Point(8, 4)}

    out = capsys.readouterr().out
    assert "Original points:\n(1, 8) (2, 5) (3, 9) (4, 7) (5, 3) (6, 6) (7, 2) (8, 4)\n" in out
    assert "Maximal points found:\n" in out


@pytest.mark.parametrize("algorithm", ["tree", "naive"])
def test_generated_points(algorithm, tmp_path):
    output = tmp_path / "maxima.txt"
    maxima = main(["--generate", "200", "--distribution", "anticorrelated",
                   "--algorithm", algorithm, "--save", str(output)])
    assert sorted(load_points(output), key=lambda p: (p.x, p.y)) == sorted(maxima, key=lambda p: (p.x, p.y))


def test_input_file(tmp_path):
    filename = tmp_path / "points.txt"
    save_points(filename, [Point(1, 1), Point(2, 2), Point(3, 3)])
    assert main(["--input", str(filename)]) == [Point(3, 3)]


def test_empty_input(tmp_path, capsys):
    filename = tmp_path / "points.txt"
    save_points(filename, [])
    assert main(["--input", str(filename)]) == []


def test_missing_input(tmp_path):
    with pytest.raises(SystemExit):
        main(["--input", str(tmp_path / "missing.txt")])


def test_plot(monkeypatch):
    shown = []
    monkeypatch.setattr("matplotlib.pyplot.show", lambda: shown.append(True))
    main(["--plot"])
    assert shown == [True]
