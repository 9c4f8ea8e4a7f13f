from __future__ import annotations
import argparse, asyncio, json, os, sys
from typing import List, Optional

from . import config as CFG
from .engine import Engine
from .loader import load_records_async
from .models import Config, MatchEntry


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"


def by_score_desc(a: MatchEntry, b: MatchEntry) -> int:
    """Comparator: higher match.score first, then lower index."""
    return (b.match.score - a.match.score) or (a.index - b.index)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        key=args.key or None,
        sort=by_score_desc if args.sort == "score" else None,
        max_results=None if args.all else args.k,
        threshold=args.threshold,
        mode=args.mode,
        diacritics=args.diacritics,
        highlight=args.highlight,
    )


def _print_table(rows: List[MatchEntry]) -> None:
    if not rows:
        print(_c("(no matches)", "2;37")); return
    print(_c("#  Score  Index  Key          Match", "1;37"))
    for i, r in enumerate(rows, 1):
        score = getattr(r.match, "score", "")
        text = getattr(r.match, "text", r.match)
        print(f"{i:<2} {score!s:<6} {r.index:<6} {r.key or '-':<12} {text}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Autocomplete CLI (Engine-backed)")
    p.add_argument("--data", required=True, help="Records file (.json, .jsonl, .csv or text lines)")
    p.add_argument("--key", nargs="+", default=None, help="Record fields to match against")
    p.add_argument("--mode", choices=CFG.MODES, default=CFG.SEARCH_MODE, help="Default matching mode")
    p.add_argument("-k", type=int, default=CFG.MAX_RESULTS, help="Max results")
    p.add_argument("--all", action="store_true", help="No cap on results (overrides -k)")
    p.add_argument("--threshold", type=int, default=CFG.THRESHOLD, help="Min query length to trigger")
    p.add_argument("--sort", choices=["none", "score"], default="none", help="Result ordering")
    p.add_argument("--diacritics", action="store_true", help="Accent-insensitive matching")
    p.add_argument("--highlight", action="store_true", help="Wrap matched text in <mark>")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.k < 0:
        p.error("-k must be >= 0")

    eng = Engine(build_config(args), verbose=args.verbose)
    asyncio.run(eng.load(load_records_async(args.data)))

    def run_query(q: str) -> None:
        rows = eng.complete(q)
        if args.json:
            print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
        else:
            _print_table(rows)

    if args.q is not None:
        run_query(args.q)

    if args.repl:
        print("Type a query (empty line to exit).")
        while True:
            try:
                q = input("> ")
            except (EOFError, KeyboardInterrupt):
                print(); break
            if not q:
                break
            run_query(q)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
