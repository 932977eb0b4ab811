from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path

from . import config as CFG
from .errors import FuzzySortError
from .fuzz import edit_distance
from .normalize import text_units
from .process import ScoreOption, calculate_score, fuzzy_map

log = logging.getLogger(__name__)


def _scorer(name: str) -> ScoreOption:
    try:
        return ScoreOption.from_name(name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _check_len(p: argparse.ArgumentParser, *texts: str) -> None:
    for t in texts:
        if len(text_units(t)) > CFG.MAX_INPUT_UNITS:
            p.error(f"input longer than {CFG.MAX_INPUT_UNITS} text units")


def _read_items(args) -> list[str]:
    items = list(args.items)
    if args.file:
        lines = Path(args.file).read_text(encoding="utf-8").splitlines()
        items.extend(ln for ln in lines if ln.strip())
    return items


def _print_table(rows) -> None:
    if not rows:
        print("(no matches)"); return
    print("#   Score  Item")
    for i, r in enumerate(rows, 1):
        print(f"{i:<3} {r.score:<6} {r.element}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="fuzzratio", description="Fuzzy string ratio CLI")
    p.add_argument("--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("score", help="Score two strings")
    ps.add_argument("a")
    ps.add_argument("b")
    ps.add_argument("--scorer", type=_scorer, default=CFG.DEFAULT_SCORER)
    ps.add_argument("--raw", action="store_true", help="Disable full processing for token scorers")
    ps.add_argument("--json", action="store_true", help="Emit JSON")

    pd = sub.add_parser("distance", help="Levenshtein distance of two strings")
    pd.add_argument("a")
    pd.add_argument("b")

    pq = sub.add_parser("sort", help="Rank items against a query")
    pq.add_argument("query")
    pq.add_argument("items", nargs="*", help="Items to rank")
    pq.add_argument("--file", default=None, help="Read items from a file, one per line")
    pq.add_argument("--floor", type=int, default=CFG.DEFAULT_FLOOR)
    pq.add_argument("--case-sensitive", action="store_true")
    pq.add_argument("--raw", action="store_true", help="Disable full processing for token scorers")
    pq.add_argument("--scorer", type=_scorer, default=CFG.DEFAULT_SCORER)
    pq.add_argument("-k", type=int, default=CFG.TOP_K, help="Top-K results")
    pq.add_argument("--json", action="store_true", help="Emit JSON rows")

    args = p.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.cmd == "distance":
        _check_len(p, args.a, args.b)
        print(edit_distance(args.a, args.b))
        return 0

    if args.cmd == "score":
        _check_len(p, args.a, args.b)
        score = calculate_score(args.a, args.b, full_process=not args.raw, score_option=args.scorer)
        if args.json:
            print(json.dumps({"score": score, "scorer": args.scorer.value}))
        else:
            print(score)
        return 0

    items = _read_items(args)
    _check_len(p, args.query, *items)
    log.info("Ranking %d items against %r", len(items), args.query)
    try:
        rows = fuzzy_map(
            items, args.query,
            floor=args.floor, sort=True, case_sensitive=args.case_sensitive,
            full_process=not args.raw, score_option=args.scorer,
        )
    except FuzzySortError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    rows = rows[:args.k]
    if args.json:
        print(json.dumps([{"element": r.element, "score": r.score} for r in rows], ensure_ascii=False, indent=2))
    else:
        _print_table(rows)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
