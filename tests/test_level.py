import pytest

from arthur.level import (
    EMPTY,
    LOADING_MAP,
    TEXTURE_FILES,
    TILE_SIZE,
    Level,
    Rect,
    default_level,
    distance,
    load_textures,
)


def test_default_level_has_source_rows():
    level = default_level()
    assert level.rows == LOADING_MAP
    assert level.height == len(LOADING_MAP)


def test_tile_at_known_cells():
    level = default_level()
    assert level.tile_at(0, 0) == "0"
    assert level.tile_at(2, 4) == "H"
    assert level.tile_at(14, 0) == "B"
    assert level.tile_at(15, 0) == "G"


def test_tile_at_outside_is_empty():
    level = default_level()
    assert level.tile_at(-1, 0) == EMPTY
    assert level.tile_at(0, -1) == EMPTY
    assert level.tile_at(level.height, 0) == EMPTY
    assert level.tile_at(0, level.width + 5) == EMPTY


def test_rect_intersects_overlap_and_symmetry():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_rect_position():
    assert Rect(12.5, 7.0, 3, 4).position() == (12.5, 7.0)


def test_tiles_in_single_cell():
    level = Level(["ab", "cd"])
    cells = list(level.tiles_in(Rect(0, 0, TILE_SIZE, TILE_SIZE)))
    assert cells == [(0, 0, "a")]


def test_tiles_in_straddling_cells():
    level = Level(["ab", "cd"])
    half = TILE_SIZE / 2
    cells = list(level.tiles_in(Rect(half, half, TILE_SIZE, TILE_SIZE)))
    assert [tile for _, _, tile in cells] == ["a", "b", "c", "d"]


def test_tiles_in_follows_moving_rect():
    level = Level(["    "])
    rect = Rect(0, 0, TILE_SIZE * 3, TILE_SIZE)
    visited = []
    for row, col, _ in level.tiles_in(rect):
        visited.append(col)
        rect.width = TILE_SIZE
    assert visited == [0]


def test_distance_properties():
    a, b = (1.0, 2.0), (4.0, 6.0)
    assert distance(a, b) == distance(b, a)
    assert distance(a, a) == 0.0
    assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0


def test_level_iterates_all_cells():
    level = Level(["ab", "c"])
    assert list(level) == [(0, 0, "a"), (0, 1, "b"), (1, 0, "c")]


def test_load_textures_reads_every_file(tmp_path):
    import pygame

    for index, name in enumerate(TEXTURE_FILES.values()):
        surface = pygame.Surface((index + 1, 2))
        pygame.image.save(surface, str(tmp_path / name))
    textures = load_textures(tmp_path)
    assert set(textures) == set(TEXTURE_FILES)
    for index, key in enumerate(TEXTURE_FILES):
        assert textures[key].get_size() == (index + 1, 2)


def test_load_textures_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_textures(tmp_path / "nowhere")