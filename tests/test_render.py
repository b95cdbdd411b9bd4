from ellermaze.mazegen.builder import MazeBuilder
from ellermaze.render.image import render_maze, FLOOR, WALL
from ellermaze.rng import PMRandom

def test_image_size_and_orientation():
    b = MazeBuilder()
    g = b.generate(6, 4, 2, PMRandom(3))
    img = render_maze(g, tile_size=8, margin=2)
    assert img.size == (6 * 8 + 4, 4 * 8 + 4)
    # outer walls are always drawn; cell centers are floor
    assert img.getpixel((2, 2)) == WALL
    assert img.getpixel((2 + 4, 2 + 4)) == FLOOR

def test_render_with_passages():
    b = MazeBuilder()
    g = b.generate(5, 5, 3, PMRandom(10))
    img = render_maze(g, tile_size=6, color_sets=True, passages=b.passages)
    assert img.size == (30, 30)

def test_uncarved_inner_walls_are_drawn():
    tile = 8
    b = MazeBuilder()
    g = b.generate(8, 8, 3, PMRandom(21))
    img = render_maze(g, tile_size=tile, passages=b.passages)
    plain = render_maze(g, tile_size=tile)
    carved, walled = 0, 0
    for y in range(g.height):
        for x in range(g.width - 1):
            # right edge of (x, y), halfway down the cell
            px = x * tile + tile - 1
            py = (g.height - 1 - y) * tile + tile // 2
            if frozenset(((x, y), (x + 1, y))) in b.passages:
                assert img.getpixel((px, py)) != WALL, f"carved edge right of ({x},{y}) drawn"
                carved += 1
            else:
                assert img.getpixel((px, py)) == WALL, f"wall right of ({x},{y}) missing"
                walled += 1
            # without passages only the outer boundary is walled
            assert plain.getpixel((px, py)) == FLOOR
    assert carved and walled
