from __future__ import annotations
import argparse, json
from typing import Callable

from . import config as CFG
from .engine import Engine


def run_repl(run_query: Callable[[str], None],
             read: Callable[[str], str] | None = None) -> None:
    """Read one query per line until the exit command, EOF or Ctrl-C."""
    read = read or input
    while True:
        try:
            q = read(CFG.PROMPT)
        except (EOFError, KeyboardInterrupt):
            break
        if q == CFG.EXIT_COMMAND:
            print("Exit!")
            break
        run_query(q)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="TF-IDF search engine CLI")
    p.add_argument("--roots", nargs="+", default=[], help="Folders to scan for .txt (default: demo corpus)")
    p.add_argument("--unit", choices=["line", "paragraph"], help="Text unit per document")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop (default when --q is not given)")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    if args.roots:
        try:
            eng = Engine.from_roots(args.roots, unit=args.unit, verbose=args.verbose)
        except FileNotFoundError as e:
            p.error(f"root folder not found: {e}")
    else:
        eng = Engine.from_labelled(CFG.DEMO_CORPUS, verbose=args.verbose)

    def run_query(q: str) -> None:
        if args.json:
            print(json.dumps([h.to_dict() for h in eng.search_hits(q)], ensure_ascii=False, indent=2))
        else:
            labels = [eng.label_for(d) for d in eng.search(q)]
            print(f"Result:[{', '.join(labels)}]")

    if args.q is not None:
        run_query(args.q)

    if args.repl or args.q is None:
        run_repl(run_query)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
