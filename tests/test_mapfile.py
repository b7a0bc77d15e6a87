import pytest

from fildefer.mapfile import (
    INT_MIN,
    HeightMap,
    MapError,
    check_map_path,
    count_columns,
    load_map,
    parse_heights,
)


def test_count_columns_ignores_surrounding_whitespace():
    assert count_columns("  1\t2   3 \n") == 3
    assert count_columns("") == 0
    assert count_columns("   \n") == 0


def test_parse_heights_reads_grid():
    hm = parse_heights("0 0 1\n2 -3 4\n")
    assert hm.rows == ((0, 0, 1), (2, -3, 4))
    assert (hm.width, hm.height) == (3, 2)
    assert hm.at(1, 1) == -3
    assert hm.at(2, 0) == 1


def test_parse_heights_last_line_without_newline():
    hm = parse_heights("1 2\n3 4")
    assert hm.rows == ((1, 2), (3, 4))


def test_parse_heights_colour_suffix_is_ignored():
    hm = parse_heights("10,0xFF0000 5,0x00FF00\n")
    assert hm.rows == ((10, 5),)


def test_parse_heights_extra_points_are_dropped():
    hm = parse_heights("1 2\n3 4 5\n")
    assert hm.rows == ((1, 2), (3, 4))


def test_parse_heights_short_row_is_an_error():
    with pytest.raises(MapError):
        parse_heights("1 2 3\n4 5\n")


def test_parse_heights_empty_is_an_error():
    with pytest.raises(MapError, match="empty"):
        parse_heights("")


def test_z_max_and_empty_default():
    assert parse_heights("1 7\n-2 3\n").z_max() == 7
    assert parse_heights("-5 -9\n").z_max() == -5
    assert HeightMap(()).z_max() == INT_MIN


def test_at_outside_raises():
    hm = parse_heights("1 2\n")
    with pytest.raises(IndexError):
        hm.at(2, 0)


def test_check_map_path_without_dot():
    with pytest.raises(MapError, match="File is invalid"):
        check_map_path("mapfile")


def test_check_map_path_wrong_extension(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("1\n")
    with pytest.raises(MapError, match="invalid extension"):
        check_map_path(path)


def test_check_map_path_missing_file(tmp_path):
    with pytest.raises(MapError, match="can't be opened"):
        check_map_path(tmp_path / "missing.fdf")


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "42.fdf"
    path.write_text("0 0 0\n0 10 0\n0 0 0\n")
    hm = load_map(path)
    assert hm.rows == ((0, 0, 0), (0, 10, 0), (0, 0, 0))
    assert hm.z_max() == 10


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError, match="empty"):
        load_map(path)


def test_load_map_directory(tmp_path):
    directory = tmp_path / "dir.fdf"
    directory.mkdir()
    with pytest.raises(MapError, match="directory"):
        load_map(directory)