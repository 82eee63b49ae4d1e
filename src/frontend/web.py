from __future__ import annotations
import argparse
from dataclasses import asdict
from flask import Flask, request, jsonify
from textindex.engine import Engine, EngineNotReady
from textindex.config import DEFAULT_COUNT_ALGORITHM
from . import initialize

app = Flask(__name__)
_engine: Engine | None = None

def _eng() -> Engine:
    if _engine is None:
        raise EngineNotReady("Engine not initialized. Call build() first.")
    return _engine

# ---------- errors ----------
@app.errorhandler(ValueError)
def _bad_request(exc: ValueError):
    return jsonify({"error": str(exc)}), 400

@app.errorhandler(EngineNotReady)
def _unavailable(exc: EngineNotReady):
    return jsonify({"error": str(exc)}), 503

# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": _engine is not None})

@app.get("/api/spellcheck")
def api_spellcheck():
    term = request.args.get("term", "", type=str)
    if not term.strip():
        return jsonify({"term": "", "exists": False, "suggestions": []})
    return jsonify(_eng().spell_check(term))

@app.get("/api/complete")
def api_complete():
    prefix = request.args.get("prefix", "", type=str)
    if not prefix.strip():
        return jsonify([])
    return jsonify(_eng().complete_word(prefix))

@app.post("/api/words")
def api_insert_word():
    body = request.get_json(silent=True) or {}
    word = str(body.get("word", ""))
    _eng().insert_autocomplete_word(word)
    return jsonify({"inserted": bool(word.strip())})

@app.get("/api/search-word")
def api_search_word():
    word = request.args.get("word", "", type=str)
    if not word.strip():
        return jsonify({})
    return jsonify(_eng().search_corpus(word))

@app.post("/api/documents")
def api_index_document():
    body = request.get_json(silent=True) or {}
    doc_id = str(body.get("id", "")).strip()
    if not doc_id:
        raise ValueError("document id is required")
    _eng().index_document(doc_id, str(body.get("text", "")))
    return jsonify({"indexed": doc_id}), 201

@app.get("/api/count")
def api_count():
    text = request.args.get("text", "", type=str)
    pattern = request.args.get("pattern", "", type=str)
    algorithm = request.args.get("algorithm", DEFAULT_COUNT_ALGORITHM, type=str)
    return jsonify({"count": _eng().count_exact(text, pattern, algorithm)})

@app.post("/api/frequency")
def api_frequency():
    term = request.get_data(as_text=True).strip().lower()
    return jsonify(_eng().record_search_term(term))

@app.get("/api/search-stats")
def api_search_stats():
    return jsonify([asdict(s) for s in _eng().search_statistics()])

@app.get("/api/database-word-count")
def api_database_word_count():
    term = request.args.get("term", "", type=str)
    return jsonify(_eng().database_word_count(term))

@app.get("/api/rank")
def api_rank():
    term = request.args.get("term", "", type=str)
    return jsonify([asdict(r) for r in _eng().rank_records(term)])

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask JSON API on top of Engine")
    ap.add_argument("--records", default=None, help="Vocabulary CSV (model,company columns)")
    ap.add_argument("--roots", nargs="+", default=[], help="Folders to scan for .txt documents")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = initialize(records_csv=args.records, roots=args.roots, verbose=args.verbose)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
