from __future__ import annotations
import argparse
import logging

from pacmaze import config


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pacmaze", description="Tile-maze Pac-Man with four ghost personalities.")
    parser.add_argument("--tile-size", type=int, default=config.TILE_SIZE,
                        help="initial tile size in pixels (the window can be resized later)")
    parser.add_argument("--lives", type=int, default=config.START_LIVES)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for frightened-ghost randomness")
    parser.add_argument("--touch", action="store_true",
                        help="start with the on-screen pad and touch speed")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    args = parser.parse_args(argv)
    if args.tile_size < 4:
        parser.error("--tile-size must be at least 4")
    if args.lives < 1:
        parser.error("--lives must be at least 1")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    # Imported late so --help works without initialising pygame
    from pacmaze.app import App
    App(tile_size=args.tile_size, lives=args.lives, seed=args.seed, touch=args.touch).run()


if __name__ == "__main__":
    main()
