# examples/surface_svg_demo.py
# Render a dome-on-waves surface to SVG, optionally across a full yaw turn
# RELEVANT FILES:python/gridsurface/grid.py,python/gridsurface/surface.py
import argparse
import math
from pathlib import Path

from gridsurface import Grid, SvgSurface, hsv

TAU = 2 * math.pi


def waves(x, z):
    return math.sin(x * math.pi) * 0.25 + math.cos(z * math.pi * 2) * 0.2


def globe(x, z):
    r = math.hypot(x, z)
    if r < 0.5:
        return math.sqrt(0.25 - r * r)
    return 0.0


def stepped(x, z):
    if math.hypot(x, z) < 0.1:
        return 0.5
    if math.hypot(x, z) < 0.2:
        return 0.35
    return max(waves(x, z) * 0.5, globe(x, z))


def concentric_color(x, y, z):
    return hsv(math.hypot(x, z) * 360, 0.5, 1)


def main():
    parser = argparse.ArgumentParser(description="Render a grid surface to SVG")
    parser.add_argument("--out", type=Path, default=Path("out"))
    parser.add_argument("--size", type=int, default=600)
    parser.add_argument("--frames", type=int, default=1)
    parser.add_argument("--perspective", action="store_true")
    args = parser.parse_args()

    args.out.mkdir(parents=True, exist_ok=True)
    grid = Grid()
    grid.set_origin(args.size / 2, args.size / 2, 100)
    grid.set_perspective(args.perspective)
    grid.set_grid_size(40)
    grid.set_width(args.size * 0.8)
    grid.set_y_scale(-1.0)  # drawing surfaces grow y downward
    grid.set_y_func(stepped)
    grid.set_color_func(concentric_color)

    for frame in range(args.frames):
        grid.set_rotation(TAU * frame / args.frames)
        surface = SvgSurface(args.size, args.size, background=(1, 1, 1, 1))
        grid.render(surface)
        surface.save_svg(args.out / f"surface_{frame:04d}.svg")


if __name__ == "__main__":
    main()
