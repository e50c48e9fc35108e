"""Command-line entry point: python -m flappy_arcade"""

import argparse
from dataclasses import replace

from .config import load_config
from .logger import get_logger, setup_logging

logger = get_logger("main")


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Bird.")
    parser.add_argument("--log-level", default="info", help="debug, info, warning or error.")
    parser.add_argument("--log-file", default=None, help="Also write NDJSON logs to this file.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe gap generation.")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = _parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    config = load_config()
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    logger.info("Playfield %dx%d at %d FPS, seed %s",
                config.playfield_width, config.playfield_height, config.fps, config.seed)

    # Imported here so the core stays usable without a display
    from .flappy_client import FlappyClient

    client = FlappyClient(config)
    try:
        client.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
