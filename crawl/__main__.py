"""Entry point: ``python -m crawl``.

Supports two modes:
  - ``python -m crawl``          → Launch FastAPI server for a browser front end
  - ``python -m crawl cli``      → Headless autoplay, logging every turn
"""

from __future__ import annotations

import argparse
import logging

# Named explicitly: under `python -m` this module is __main__, outside the crawl namespace
logger = logging.getLogger("crawl.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based Dungeon Crawl Engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    _add_game_arguments(srv)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless autoplay game")
    cli.add_argument("--turns", type=int, default=500)
    cli.add_argument("--floor", type=int, default=1)
    _add_game_arguments(cli)

    return parser


def _add_game_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--size", type=int, default=20)
    parser.add_argument("--carve-steps", type=int, default=None,
                        help="Floor cells to carve (default: scaled to --size)")
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _config_from_args(args: argparse.Namespace):
    from crawl.config import GameConfig

    overrides = {"seed": args.seed, "log_level": args.log_level}
    if args.carve_steps is not None:
        overrides["carve_steps"] = args.carve_steps
    return GameConfig.for_map_size(args.size, **overrides)


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from crawl.api.app import create_app
    from crawl.systems.map_generator import GenerationFailed, MapGenerator
    from crawl.systems.rng import DeterministicRNG
    from crawl.utils.logging import setup_logging

    config = _config_from_args(args)
    setup_logging(config.log_level)

    # The lifespan hook builds the first floor; fail here instead of mid-startup
    try:
        MapGenerator(config, DeterministicRNG(config.seed)).generate(config.map_size)
    except GenerationFailed as exc:
        logger.error("Cannot start server: %s", exc)
        raise SystemExit(1) from exc

    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from crawl.actions.combat import CombatResolver
    from crawl.ai.brain import greedy_step
    from crawl.core.enums import Domain, TurnEvent
    from crawl.core.models import DIRECTION_OFFSETS
    from crawl.engine.turn_engine import TurnEngine
    from crawl.systems.map_generator import GenerationFailed
    from crawl.systems.rng import DeterministicRNG
    from crawl.utils.logging import setup_logging

    config = _config_from_args(args)
    setup_logging(config.log_level)

    rng = DeterministicRNG(config.seed)
    engine = TurnEngine(config, rng)
    reach = CombatResolver(config.attack_shape)

    try:
        snap = engine.new_game(args.floor)

        # Attack anything in reach, otherwise head for the exit, otherwise wander
        for turn in range(args.turns):
            if snap.dead:
                break
            player = snap.player.pos
            if any(snap.enemy_at(p) for p in reach.target_set(player)):
                result = engine.submit_attack()
            else:
                step = greedy_step(player, snap.exit) - player
                result = engine.submit_move(step.x, step.y)
                if not result.has(TurnEvent.MOVED) and not result.has(TurnEvent.FLOOR_ADVANCED):
                    offset = DIRECTION_OFFSETS[rng.next_int(Domain.AUTOPLAY, args.floor, turn, 0, 3)]
                    result = engine.submit_move(offset.x, offset.y)
            snap = result.snapshot
            logger.debug("Turn %d: %s | %s", snap.turn, [e.value for e in result.events], "; ".join(result.messages))
    except GenerationFailed as exc:
        logger.error("Map generation failed: %s", exc)
        raise SystemExit(1) from exc

    p = snap.player
    logger.info(
        "Finished: status=%s floor=%d turn=%d HP %d/%d XP %d",
        snap.status.name, p.floor, snap.turn, p.hp, p.max_hp, p.xp,
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])

    if args.command == "serve":
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
