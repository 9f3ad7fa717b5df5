"""Command-line launcher for tick-snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tick-snake",
        description="Fixed-rate snake simulation with a text renderer.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Run the game loop.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    play_p.add_argument(
        "--ticks", type=int, default=100,
        help="Number of ticks to run (0 runs until interrupted).",
    )
    play_p.add_argument(
        "--rate", type=float, default=None,
        help="Ticks per second (overrides the config).",
    )
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--keys", type=str, default="",
        help="Comma-separated key presses, one consumed per tick.",
    )
    play_p.add_argument(
        "--quiet", action="store_true",
        help="Do not draw frames; only print the final score.",
    )

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Print the effective configuration as JSON.",
    )
    config_p.add_argument("--config", type=str, default=None)
    config_p.add_argument(
        "--save", type=str, default=None,
        help="Also write the configuration to this path.",
    )

    return parser


def _load_config(args: argparse.Namespace):
    from tick_snake.config import GameConfig

    config = (
        GameConfig.load(args.config)
        if args.config else GameConfig()
    )

    overrides: dict = {}
    flag_map = {
        "rate": "ticks_per_second",
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


def _run_play(args: argparse.Namespace) -> int:
    from tick_snake.clock import SimulationClock
    from tick_snake.controls import dispatch_key
    from tick_snake.engine import GameState
    from tick_snake.render import GlyphCache, TextRenderer

    if args.ticks < 0:
        print("--ticks must be >= 0", file=sys.stderr)  # noqa: T201
        return 2

    config = _load_config(args)
    state = GameState(config)
    if not args.quiet:
        renderer = TextRenderer(state.playfield, sys.stdout, GlyphCache())
        state.add_listener(renderer.draw)

    keys = iter([k for k in args.keys.split(",") if k.strip()])

    def on_tick() -> None:
        key = next(keys, None)
        if key is not None:
            dispatch_key(state, key)
        state.tick()

    clock = SimulationClock(on_tick, ticks_per_second=config.ticks_per_second)
    try:
        clock.run(max_ticks=args.ticks or None)
    except KeyboardInterrupt:
        logger.info("Interrupted.")

    print(  # noqa: T201
        f"Final score: {state.score.eaten} after {state.ticks} ticks",
    )
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args)
    if args.save:
        config.save(args.save)
    print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``tick-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
