"""CLI launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import logging
import sys

from term_snake.config import GameConfig

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play snake in the terminal with the arrow keys (q quits).",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--length", type=int, default=None)
    parser.add_argument("--start-x", type=int, default=None)
    parser.add_argument("--start-y", type=int, default=None)
    parser.add_argument(
        "--tick-ms", type=int, default=None,
        help="Milliseconds between simulation steps.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs here; stdout is reserved for the game screen.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=(
            "Log level for --log-file. Without a log file, stderr never "
            "shows anything below WARNING."
        ),
    )
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path and exit.",
    )
    return parser


def _log_level(args: argparse.Namespace) -> int:
    level = logging.getLevelName(args.log_level)
    if args.log_file:
        return level
    # stderr shares the terminal with the game screen.
    return max(level, logging.WARNING)


def _configure_logging(args: argparse.Namespace) -> None:
    logging.basicConfig(
        filename=args.log_file, level=_log_level(args), format=_LOG_FORMAT,
    )


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "length": "initial_length",
        "start_x": "start_x",
        "start_y": "start_y",
        "tick_ms": "tick_interval_ms",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig.from_dict(d)
    return config


def _play(config: GameConfig) -> int:
    from term_snake.engine import GameLoop
    from term_snake.keyboard import (
        HIDE_CURSOR,
        SHOW_CURSOR,
        KeyboardInput,
        raw_mode,
    )

    keyboard = KeyboardInput()
    with raw_mode(keyboard.fd):
        sys.stdout.write(HIDE_CURSOR)
        try:
            keyboard.start()
            result = GameLoop(config, output=sys.stdout, keyboard=keyboard).run()
        except KeyboardInterrupt:
            logger.info("Interrupted.")
            return 130
        finally:
            sys.stdout.write(SHOW_CURSOR)
            sys.stdout.flush()

    if result.quit:
        print(f"Quit, length {result.length}")  # noqa: T201
    else:
        reason = result.reason.value.replace("_", " ")
        print(f"Game over: {reason}, length {result.length}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        config = _resolve_config(args)
    except (OSError, ValueError, TypeError) as exc:
        parser.error(f"invalid configuration: {exc}")

    if args.save_config:
        config.save(args.save_config)
        return 0

    return _play(config)


if __name__ == "__main__":
    sys.exit(main())
