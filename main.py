"""
3D Wind Boids
=============

A flocking simulation in a bounded 3D volume, steered by separation,
alignment, cohesion, a drifting wind, and click-to-repel points.

Controls:
    - Mouse drag: Orbit camera (disabled while chasing)
    - Click: Place a repel point for two seconds
    - Mouse wheel / Q/E: Zoom
    - W/S/A/D: Orbit camera
    - C: Toggle chase mode (track the flock's center)
    - G: Toggle grid
    - V: Toggle wind field
    - M: Toggle automatic/manual wind
    - [ / ]: Fewer / more boids
    - 1-5: Select perception radius, separation, alignment, cohesion or wind strength
    - + / -: Raise / lower the selected value
    - Arrow keys: Turn the wind (manual wind only)
    - ESC: Quit
"""

import argparse

from config import boids as config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="3D wind boids simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--count", type=int, default=config.BOIDS["count"],
                        help=f"Number of boids (default: {config.BOIDS['count']})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible flocks")
    parser.add_argument("--chase", action="store_true",
                        help="Start with the camera tracking the flock")
    parser.add_argument("--manual-wind", action="store_true",
                        help="Start with a fixed wind direction")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")
    return args


def main(argv=None):
    args = parse_args(argv)

    from core.application import Application

    app = Application(
        num_boids=args.count,
        seed=args.seed,
        chase=args.chase,
        automatic_wind=not args.manual_wind
    )
    app.run()


if __name__ == "__main__":
    main()
