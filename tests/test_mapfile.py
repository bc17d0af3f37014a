import pytest

from wireframe.mapfile import (
    EmptyMapError,
    HeightMap,
    parse_map,
    read_map,
    split_words,
)
from wireframe.parsing import MapFormatError


def test_split_words_drops_empty_pieces():
    assert split_words("  a  b ", " ") == ["a", "b"]


def test_split_words_empty_text():
    assert split_words("", " ") == []


def test_split_words_without_separator():
    assert split_words("abc", " ") == ["abc"]


def test_split_words_only_separators():
    assert split_words("\n\n\n", "\n") == []


def test_parse_map_basic_grid():
    hmap = parse_map("0 1 2\n3 4 5\n")
    assert hmap.field == [[0, 1, 2], [3, 4, 5]]
    assert hmap.size_x == 3
    assert hmap.size_y == 2
    assert hmap.min_height == 0
    assert hmap.max_height == 5


def test_parse_map_default_color_is_white():
    hmap = parse_map("1 2\n3 4")
    assert hmap.colors == [[0xFFFFFF, 0xFFFFFF], [0xFFFFFF, 0xFFFFFF]]


def test_parse_map_explicit_colors():
    hmap = parse_map("1,0xFF0000 2,255\n3 4,0x00ff00")
    assert hmap.colors[0] == [0xFF0000, 255]
    assert hmap.colors[1][1] == 0x00FF00
    assert hmap.field == [[1, 2], [3, 4]]


def test_parse_map_signed_heights():
    hmap = parse_map("-5 +3\n0 7")
    assert hmap.field == [[-5, 3], [0, 7]]
    assert hmap.min_height == -5
    assert hmap.max_height == 7


def test_parse_map_tabs_are_separators():
    assert parse_map("1\t2\t 3\n4 5\t6").field == [[1, 2, 3], [4, 5, 6]]


def test_parse_map_extra_spaces_ignored():
    assert parse_map("  1   2  \n3 4").field == [[1, 2], [3, 4]]


def test_parse_map_single_point():
    hmap = parse_map("42")
    assert hmap.field == [[42]]
    assert hmap.min_height == hmap.max_height == 42


def test_parse_map_min_max_bound_all_heights():
    hmap = parse_map("3 -1 8\n0 12 -7\n5 5 5")
    for row in hmap.field:
        for value in row:
            assert hmap.min_height <= value <= hmap.max_height
    assert hmap.min_height in [v for row in hmap.field for v in row]
    assert hmap.max_height in [v for row in hmap.field for v in row]


def test_parse_map_empty_text():
    with pytest.raises(EmptyMapError):
        parse_map("")


def test_parse_map_leading_newline():
    with pytest.raises(MapFormatError):
        parse_map("\n1 2\n3 4")


def test_parse_map_blank_line_between_rows():
    with pytest.raises(MapFormatError):
        parse_map("1 2\n\n3 4")


def test_parse_map_trailing_blank_line():
    with pytest.raises(MapFormatError):
        parse_map("1 2\n3 4\n\n")


def test_parse_map_ragged_rows():
    with pytest.raises(MapFormatError):
        parse_map("1 2 3\n4 5")


def test_parse_map_invalid_height():
    with pytest.raises(MapFormatError):
        parse_map("1 x\n3 4")


def test_parse_map_invalid_color():
    with pytest.raises(MapFormatError):
        parse_map("1,0xGG 2\n3 4")


def test_parse_map_whitespace_only_has_no_points():
    with pytest.raises(MapFormatError):
        parse_map("   \n  ")


def test_height_map_rejects_ragged_grid():
    with pytest.raises(ValueError):
        HeightMap(field=[[1, 2], [3]], colors=[[0, 0], [0]])


def test_height_map_rejects_mismatched_colors():
    with pytest.raises(ValueError):
        HeightMap(field=[[1, 2]], colors=[[0]])


def test_read_map_from_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("0 0 0\n0 10,0xFF0000 0\n0 0 0\n")
    hmap = read_map(path)
    assert hmap.size_x == 3
    assert hmap.size_y == 3
    assert hmap.field[1][1] == 10
    assert hmap.colors[1][1] == 0xFF0000
    assert hmap.max_height == 10


def test_read_map_stops_at_nul(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_bytes(b"1 2\x00garbage\n\n")
    assert read_map(path).field == [[1, 2]]


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_bytes(b"")
    with pytest.raises(EmptyMapError):
        read_map(path)


def test_read_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_map(tmp_path / "missing.fdf")


def test_read_map_matches_parse_map(tmp_path):
    text = "1 2 3\n-4 5,0xabcdef 6\n"
    path = tmp_path / "map.fdf"
    path.write_text(text)
    from_file = read_map(path)
    from_text = parse_map(text)
    assert from_file.field == from_text.field
    assert from_file.colors == from_text.colors