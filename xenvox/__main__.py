"""
XenVox command line.

Run: python -m xenvox [--layers N] [--edo N ...] [--size WxH]
"""

from __future__ import annotations
from dataclasses import replace
from typing import List, Optional, Tuple
import argparse
import logging

from .app.loop import UpdateLoop
from .app.model import Model
from .config import AppConfig
from .errors import StartupFailure
from .logging_config import setup_logging
from .osc.dispatcher import MessageDispatcher
from .ui.draw import ScreenSize

logger = logging.getLogger(__package__)


def parse_size(text: str) -> Tuple[int, int]:
    try:
        w, h = text.lower().split("x")
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got '{text}'")


def build_parser() -> argparse.ArgumentParser:
    defaults = AppConfig()
    parser = argparse.ArgumentParser(
        prog="xenvox",
        description="Just-intonation ratio tree and EDO grid with an OSC pitch cursor",
    )
    parser.add_argument("--layers", type=int, default=defaults.tree.layers,
                        help=f"Mediant tree depth below the 3/2 root (default: {defaults.tree.layers})")
    parser.add_argument("--edo", type=int, action="append", default=None,
                        help="EDO division count; repeat for several bands "
                             f"(default: {' '.join(map(str, defaults.grid.edos))})")
    parser.add_argument("--size", type=parse_size, default=defaults.window.size,
                        help="Initial window size, e.g. 960x600")
    parser.add_argument("--backend", type=str, default=defaults.window.backend,
                        help=f"moderngl-window backend (default: {defaults.window.backend})")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-file", type=str, default=None,
                        help="Also write the log to this path")
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    config = AppConfig()
    config.tree = replace(config.tree, layers=args.layers)
    if args.edo:
        config.grid = replace(config.grid, edos=tuple(args.edo))
    config.window = replace(config.window, size=tuple(args.size), backend=args.backend)
    return config.validate()


def run(config: AppConfig) -> int:
    # Imported here so the CLI can report bad arguments without a GL stack
    from .app.window import MglwHost

    host = MglwHost.create(config.window)
    try:
        dispatcher = MessageDispatcher(config.osc)
        model = Model.create(config)
        model.screen = ScreenSize(*map(float, host.window.size))
        loop = UpdateLoop(model, host, host.renderer, dispatcher)
        loop.run()
    finally:
        host.destroy()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        config = config_from_args(args)
    except ValueError as e:
        logger.critical("Invalid configuration: %s", e)
        return 1

    logger.info("Sending notes to %s:%d", config.osc.host, config.osc.port)
    try:
        return run(config)
    except StartupFailure as e:
        logger.critical("Startup failed: %s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
