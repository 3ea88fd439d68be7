# main.py
import argparse
import logging

from config import AppConfig, GRID_SIZE, TICK_MS

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Grid snake with a seedable engine")
    p.add_argument("mode", choices=["play", "replay"])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--grid-size", type=int, default=GRID_SIZE)
    p.add_argument("--tick-ms", type=int, default=TICK_MS)
    p.add_argument("--log-level", default="INFO")
    p.add_argument("--game-log", default=None, help="append finished games to this CSV")
    # replay only
    p.add_argument("--ticks", type=int, default=50)
    p.add_argument("--move", action="append", default=[], metavar="TICK:DIR",
                   help="request DIR before TICK, e.g. 3:up (repeatable)")
    p.add_argument("--quiet", action="store_true", help="replay: print the summary only")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig(
        grid_size=args.grid_size,
        tick_ms=args.tick_ms,
        seed=args.seed,
        log_level=args.log_level.upper(),
        game_log_path=args.game_log,
    )

def main(argv=None):
    args = parse_args(argv)
    try:
        cfg = build_config(args)
    except ValueError as e:
        raise SystemExit(f"error: {e}")
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "play":
        from runners.run_snake import main as play
        play(cfg)
    elif args.mode == "replay":
        from runners.run_replay import main as replay
        seed = cfg.seed if cfg.seed is not None else 1
        try:
            replay(cfg, seed, args.move, args.ticks, show_frames=not args.quiet)
        except ValueError as e:
            raise SystemExit(f"error: {e}")

if __name__ == "__main__":
    main()
