from __future__ import annotations
import argparse, json, sys
from dataclasses import asdict
from textindex.config import COUNT_ALGORITHMS, DEFAULT_COUNT_ALGORITHM
from textindex.engine import Engine
from . import initialize

OPS = ("spell", "suggest", "complete", "search", "whole-word", "count", "db-count", "rank", "frequency")

def run_op(eng: Engine, op: str, q: str, *, text: str = "", algorithm: str = DEFAULT_COUNT_ALGORITHM):
    """Dispatch one query to the engine and return a JSON-friendly value."""
    if op == "spell":
        return eng.spell_check(q)
    if op == "suggest":
        return eng.suggest_words(q)
    if op == "complete":
        return eng.complete_word(q)
    if op == "search":
        return eng.search_corpus(q)
    if op == "whole-word":
        return eng.find_whole_word(q)
    if op == "count":
        return eng.count_exact(text, q, algorithm)
    if op == "db-count":
        return eng.database_word_count(q)
    if op == "rank":
        return [asdict(r) for r in eng.rank_records(q)]
    if op == "frequency":
        return eng.record_search_term(q.strip().lower())
    raise ValueError(f"Unknown op {op!r}")

def _print(result, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return
    if isinstance(result, dict) and result and all(isinstance(v, dict) for v in result.values()):
        for doc_id, occ in result.items():
            offs = ", ".join(str(o) for o in sorted(occ))
            print(f"{doc_id:<36} {offs}")
    elif isinstance(result, list):
        if not result:
            print("(no matches)"); return
        for i, row in enumerate(result, 1):
            print(f"{i:<3} {row}")
    else:
        print(result)

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Text index CLI (Engine-backed)")
    p.add_argument("--records", default=None, help="Vocabulary CSV (model,company columns)")
    p.add_argument("--roots", nargs="+", default=[], help="Folders to scan for .txt")
    p.add_argument("--op", choices=OPS, default="spell", help="Operation to run")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--text", default="", help="Text for --op count")
    p.add_argument("--algorithm", choices=COUNT_ALGORITHMS, default=DEFAULT_COUNT_ALGORITHM)
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = initialize(records_csv=args.records, roots=args.roots, verbose=args.verbose)
    try:
        def run_query(q: str):
            _print(run_op(eng, args.op, q, text=args.text, algorithm=args.algorithm), args.json)

        if args.q:
            run_query(args.q)

        if args.repl:
            print(f"Type a query for '{args.op}' (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    sys.exit(main())
