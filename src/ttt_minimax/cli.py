from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import EngineConfig
from .errors import InvalidInputError
from .game_basics import EMPTY, PLAYERS, deserialize_board, is_terminal, is_winning, serialize_board
from .geometry import BoardGeometry
from .scoring import score_board
from .solver import mini_max
from .trajectories import play_out
from .validation import validate_input


def build_parser(cfg: EngineConfig) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-minimax", description="Depth-bounded minimax for n-in-a-row")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    def add_search_args(sp: argparse.ArgumentParser, board_required: bool = False) -> None:
        sp.add_argument(
            "--board",
            required=board_required,
            help='Board, e.g. "xx0oo0000" or "x,x,0,o,o,0,0,0,0" (0=empty)',
        )
        sp.add_argument("--player", default="x", help="Player to move: x or o (default: x)")
        sp.add_argument(
            "--depth", type=int, default=cfg.depth, help=f"Search depth in plies (default: {cfg.depth})"
        )
        sp.add_argument(
            "--size",
            type=int,
            default=None,
            help=f"Board side length (default: inferred from the board, else {cfg.side})",
        )

    p_move = sub.add_parser("move", help="Pick the best move for a player")
    add_search_args(p_move)
    p_move.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_score = sub.add_parser("score", help="Score a decided board (+1 win, -1 loss, 0 draw)")
    add_search_args(p_score, board_required=True)

    p_play = sub.add_parser("play", help="Let the engine play both sides until the game ends")
    add_search_args(p_play)

    p_lines = sub.add_parser("lines", help="Print the win-line table for a board side")
    p_lines.add_argument("--size", type=int, default=cfg.side, help=f"Board side length (default: {cfg.side})")

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _resolve_geometry(board: Sequence[str], size: Optional[int], cfg: EngineConfig) -> BoardGeometry:
    if size is not None:
        return BoardGeometry.for_side(size)
    return BoardGeometry.for_board(board) or BoardGeometry.for_side(cfg.side)


def _render(board: Sequence[str], side: int) -> str:
    if len(board) != side * side:
        return serialize_board(board)
    return "\n".join(serialize_board(board[r * side:(r + 1) * side]) for r in range(side))


def _outcome(board: Sequence[str], geometry: BoardGeometry) -> str:
    for p in PLAYERS:
        if is_winning(p, board, geometry):
            return f"{p} wins"
    return "draw"


def _run_move_stdin(ns: argparse.Namespace, cfg: EngineConfig) -> int:
    import csv as _csv
    import sys as _sys

    w = _csv.writer(_sys.stdout)
    w.writerow(["board", "player", "depth", "best"])
    for line in _sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        b = deserialize_board(raw)
        try:
            geometry = _resolve_geometry(b, ns.size, cfg)
            best = mini_max(ns.depth, ns.player, b, geometry)
        except ValueError as e:
            logging.warning("Skipping %s: %s", raw, e)
            continue
        w.writerow([serialize_board(b), ns.player, ns.depth, serialize_board(best)])
    return 0


def main(argv: list[str] | None = None) -> int:
    try:
        cfg = EngineConfig.from_env()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
        logging.error("%s", e)
        return 2
    parser = build_parser(cfg)
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("ttt-minimax"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "lines":
        try:
            geometry = BoardGeometry.for_side(ns.size)
        except ValueError as e:
            logging.error("%s", e)
            return 2
        for line in geometry.win_lines:
            print(" ".join(map(str, line)))
        return 0

    if ns.cmd == "move" and ns.stdin:
        return _run_move_stdin(ns, cfg)

    if ns.cmd in ("move", "score", "play"):
        if ns.board is None:
            side = ns.size if ns.size is not None else cfg.side
            b = tuple(EMPTY * (side * side))
        else:
            b = deserialize_board(ns.board)
        try:
            geometry = _resolve_geometry(b, ns.size, cfg)
        except ValueError as e:
            logging.error("%s", e)
            return 2
        try:
            if ns.cmd == "move":
                best = mini_max(ns.depth, ns.player, b, geometry)
                logging.info("best=%s changed=%s", serialize_board(best), best != b)
                logging.debug("\n%s", _render(best, geometry.side))
            elif ns.cmd == "score":
                if not is_terminal(ns.player, b, geometry):
                    validate_input(ns.depth, ns.player, b, geometry)
                    logging.error("Board %s is not decided; use 'move' to search it.", serialize_board(b))
                    return 2
                logging.info("score=%d", score_board(ns.depth, ns.player, b, geometry))
            else:
                game = play_out(ns.depth, ns.player, b, geometry)
                for i, s in enumerate(game):
                    logging.info("ply=%d board=%s", i, serialize_board(s))
                    logging.debug("\n%s", _render(s, geometry.side))
                logging.info("outcome=%s", _outcome(game[-1], geometry))
        except InvalidInputError as e:
            logging.error("%s: %s", e.kind.value, e)
            return 2
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
