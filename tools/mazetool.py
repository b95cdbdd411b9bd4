#!/usr/bin/env python3
import argparse, csv, logging, os
from ellermaze.config import DEFAULTS
from ellermaze.mazegen.builder import MazeBuilder, rng_for_seed
from ellermaze.tiles import classify_grid

def write_tsv(mat, path, include_header=False):
    # Rows are written top row first so the file reads like the maze.
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in reversed(mat):
            w.writerow(r)

def build(args):
    builder = MazeBuilder()
    grid = builder.generate(args.width, args.height, args.difficulty, rng_for_seed(args.seed))
    return builder, grid

def cmd_emit(args):
    _, grid = build(args)
    write_tsv(grid.as_matrix(), args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_masks(args):
    _, grid = build(args)
    write_tsv(classify_grid(grid), args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_png(args):
    from ellermaze.render.image import render_maze
    builder, grid = build(args)
    img = render_maze(grid, tile_size=args.tile, margin=args.margin,
                      color_sets=args.color_sets,
                      passages=builder.passages if args.walls else None)
    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(args.out)
    print(f"Wrote {args.out}")

def add_maze_args(p):
    p.add_argument('--width', type=int, default=DEFAULTS.width)
    p.add_argument('--height', type=int, default=DEFAULTS.height)
    p.add_argument('--difficulty', type=int, default=DEFAULTS.difficulty,
                   help='1 easy, 2 normal, 3 hard (anything else acts as 2)')
    p.add_argument('--seed', type=int, default=DEFAULTS.seed)
    p.add_argument('--out', type=str, required=True)

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit', help='TSV of set IDs')
    add_maze_args(p1)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('masks', help='TSV of wall bitmasks')
    add_maze_args(p2)
    p2.add_argument('--header', action='store_true')
    p2.set_defaults(func=cmd_masks)
    p3 = sub.add_parser('png', help='render with Pillow')
    add_maze_args(p3)
    p3.add_argument('--tile', type=int, default=16, help='Tile size in pixels')
    p3.add_argument('--margin', type=int, default=0)
    p3.add_argument('--color-sets', action='store_true', help='Tint cells by set ID')
    p3.add_argument('--walls', action='store_true', help='Draw uncarved inner walls too')
    p3.set_defaults(func=cmd_png)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    args.func(args)

if __name__ == '__main__':
    main()
