import pytest

from ivo.geometry import Point21, Polygon21
from ivo.mesher import mesher1, read_diagram, write_diagram


def test_mesher1_uniform_partition():
    intervals = mesher1(0.0, 1.0, 4)
    assert len(intervals) == 5
    assert intervals[0] == 0.0
    assert intervals[-1] == pytest.approx(1.0)
    steps = [b - a for a, b in zip(intervals, intervals[1:])]
    assert all(step == pytest.approx(steps[0]) for step in steps)
    assert sorted(intervals) == intervals


def test_mesher1_single_interval():
    assert mesher1(2.0, 3.0, 1) == pytest.approx([2.0, 3.0])


@pytest.mark.parametrize("a, b, n", [(1.0, 0.0, 3), (0.0, 0.0, 3), (0.0, 1.0, 0)])
def test_mesher1_rejects_bad_arguments(a, b, n):
    with pytest.raises(ValueError):
        mesher1(a, b, n)


def _diagram():
    return [
        Polygon21([Point21(0.0, 0.0), Point21(0.5, 0.0), Point21(0.5, 1.0), Point21(0.0, 1.0)]),
        Polygon21([Point21(0.5, 0.0), Point21(1.0, 0.0), Point21(0.5, 1.0)]),
    ]


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "diagram.p2"
    diagram = _diagram()
    write_diagram(path, diagram)
    assert read_diagram(path) == diagram


def test_written_header(tmp_path):
    path = tmp_path / "diagram.p2"
    write_diagram(path, _diagram())
    lines = path.read_text().splitlines()
    assert lines[0] == "@ Readable space diagram."
    assert lines[1] == "@ 2 cells."
    assert len(lines) == 4


def test_round_trip_keeps_fourteen_digits(tmp_path):
    path = tmp_path / "diagram.p2"
    point = Point21(1.0 / 3.0, 2.0 / 7.0, 0.0)
    write_diagram(path, [Polygon21([point])])
    read_point = read_diagram(path)[0][0]
    assert read_point.x == pytest.approx(point.x, abs=1e-13)
    assert read_point.y == pytest.approx(point.y, abs=1e-13)


def test_read_skips_comments_and_partial_triplets(tmp_path):
    path = tmp_path / "diagram.p2"
    path.write_text("@ comment\n0 0 0 1 0 0 1 1\n@ another\n2 2 0\n")
    diagram = read_diagram(path)
    assert len(diagram) == 2
    assert list(diagram[0]) == [Point21(0.0, 0.0, 0.0), Point21(1.0, 0.0, 0.0)]
    assert list(diagram[1]) == [Point21(2.0, 2.0, 0.0)]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_diagram(tmp_path / "missing.p2")