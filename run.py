"""Delve CLI entry point.

Subcommands:
    server  Run the Flask-SocketIO game server (default)
    maze    Generate one level and print it as ASCII

Flags win over environment variables; `--env-file` loads a .env first.
Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

__version__ = "0.1.0"

_color_init()
# Plain output when piped or captured (e.g. under pytest)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except (AttributeError, ValueError):  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False

EPILOG = dedent(
    """
    Environment variables:
      HOST               Bind address for the web server (default: 0.0.0.0)
      PORT               Port for the web server (default: 5000)
      DELVE_BOARD_SIZE   Board edge length (default: 10)
      DELVE_SEED         Fixed random seed for reproducible games
      DELVE_LOG_LEVEL    debug | info | warn | error (default: info)

    Examples:
      python run.py server --port 8080
      python run.py maze --size 15 --seed 7
    """
)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="Delve",
        description="Delve Dungeon Server: serve games over HTTP/Socket.IO or print a generated level.",
        epilog=EPILOG,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--env-file", dest="env_file", help="Path to a .env file to load before processing flags")
    parser.add_argument("--version", action="version", version=f"Delve Dungeon Server {__version__}")
    parser.set_defaults(host=None, port=None, debug=False, size=None, seed=None)

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser("server", help="Run the Socket.IO web server")
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")

    maze_parser = subparsers.add_parser(
        "maze",
        help="Print a generated level as ASCII",
        description="# wall, . floor, > exit, @ player, M monster, $ gold, ! potion",
    )
    maze_parser.add_argument("--size", type=int, default=None, help="Board size (default: env or 10)")
    maze_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    # No subcommand means server
    if len(argv) == 0:
        argv = ["server"]
    return parser.parse_args(argv)


def _paint(text, color) -> str:
    return f"{color}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else str(text)


def _banner(mode: str, host: str, port: int) -> str:
    divider = _paint("=" * 40, Fore.MAGENTA)
    rows = [("Mode:", mode.upper()), ("Host:", host), ("Port:", port), ("WebSockets:", "enabled")]
    lines = [divider, "  " + _paint("Delve Server Bootup", Fore.CYAN + Style.BRIGHT), divider]
    lines += [f"  {_paint(k, Fore.YELLOW):12} {_paint(v, Fore.GREEN)}" for k, v in rows]
    lines += [divider, ""]
    return "\n".join(lines)


def _print_maze(size, seed) -> int:
    from delve.config import GameConfig
    from delve.dungeon import render_ascii
    from delve.errors import ConfigError
    from delve.services.turn_engine import start_game

    try:
        overrides = {k: v for k, v in (("board_size", size), ("seed", seed)) if v is not None}
        config = GameConfig.from_env().with_overrides(overrides)
    except ConfigError as err:
        print(_paint(f"[ERROR] {err.message}", Fore.RED))
        return 1
    state, _ = start_game(config)
    print(render_ascii(state.maze, state.entities, state.player))
    m = state.level_metrics
    print(
        f"floors={m['floor_cells']} monsters={m['monsters_placed']}/{m['monsters_requested']} "
        f"gold={m['gold_placed']}/{m['gold_requested']} potions={m['potions_placed']}/{m['potions_requested']} "
        f"exit_reachable={m['exit_reachable']}"
    )
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if args.env_file:
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    mode = (args.command or "server").lower()
    if mode == "maze":
        return _print_maze(args.size, args.seed)

    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = int(args.port or os.getenv("PORT", "5000"))
    debug = bool(args.debug or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Deferred so .env values are visible when the app module reads its config
    from delve.logging_utils import log
    from delve.server import start_server

    print(_banner(mode, host, port))
    log.info(event="startup", mode=mode, host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def cli():
    """Console-script entry point."""
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
