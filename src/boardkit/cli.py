from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import load_settings
from .errors import BoardError
from .presenters import BoardPresenter, available_presenters, get_presenter
from .session import BoardSession
from .state import BoardState


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="boardkit", description="Render Tic-tac-toe boards")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    fmt_help = "Presenter to render with (default: $BOARDKIT_PRESENTER or console)"

    p_render = sub.add_parser(
        "render",
        help="Render a board string (digits, 0=empty,1=X,2=O, row-major)",
    )
    p_render.add_argument("--board", help="Board string, e.g., 100020000 (omit with --stdin)")
    p_render.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and render each"
    )
    p_render.add_argument("--format", choices=available_presenters(), default=None, help=fmt_help)
    p_render.add_argument("--out", type=Path, default=None, help="Write output to a file instead of stdout")

    p_play = sub.add_parser("play", help="Apply moves to an empty board and render the result")
    p_play.add_argument("--size", type=int, default=None, help="Board size (default: $BOARDKIT_SIZE or 3)")
    p_play.add_argument(
        "--move",
        action="append",
        default=[],
        metavar="ROW,COL,MARK",
        help="Move to apply, e.g. 0,0,X (repeatable, applied in order)",
    )
    p_play.add_argument("--format", choices=available_presenters(), default=None, help=fmt_help)
    p_play.add_argument("--out", type=Path, default=None, help="Write output to a file instead of stdout")

    return p


def parse_move(raw: str) -> Tuple[Tuple[int, int], str]:
    parts = [x.strip() for x in raw.split(",")]
    if len(parts) != 3:
        raise ValueError(f"Move must look like ROW,COL,MARK: {raw!r}")
    return (int(parts[0]), int(parts[1])), parts[2]


def _print_info() -> None:
    import importlib.util
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _make_presenter(name: Optional[str], default: str, empty: str, stream) -> BoardPresenter:
    name = name or default
    if name == "console":
        return get_presenter(name, stream=stream, empty=empty)
    return get_presenter(name, stream=stream)


def _render_stdin(presenter: BoardPresenter) -> None:
    first = True
    for line in sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            state = BoardState.deserialize(raw)
        except BoardError as e:
            logging.warning("Skipping line: %s", e)
            continue
        if not first and presenter.stream is not None:
            presenter.stream.write("\n")
        presenter.display(state)
        first = False


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("boardkit"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd not in ("render", "play"):
        parser.print_help()
        return 0

    try:
        settings = load_settings()
    except BoardError as e:
        logging.error("%s", e)
        return 2

    # buffered so --out is only touched once the whole command has succeeded
    stream = io.StringIO()
    try:
        presenter = _make_presenter(ns.format, settings.presenter, settings.empty, stream)

        if ns.cmd == "render":
            if ns.stdin:
                _render_stdin(presenter)
            elif not ns.board:
                logging.error("Provide --board or --stdin.")
                return 2
            else:
                presenter.display(BoardState.deserialize(ns.board))
        else:
            size = ns.size if ns.size is not None else settings.size
            session = BoardSession(size=size)
            for raw in ns.move:
                position, mark = parse_move(raw)
                session.play(position, mark)
            if ns.verbose:
                logging.info("applied_moves=%d", len(session.moves))
            session.attach(presenter)
            session.refresh()
    except (BoardError, ValueError) as e:
        logging.error("%s", e)
        return 2

    if ns.out is not None:
        ns.out.write_text(stream.getvalue(), encoding="utf-8")
    else:
        sys.stdout.write(stream.getvalue())
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
