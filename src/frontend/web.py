from __future__ import annotations
import argparse
import logging
from pathlib import Path

from flask import Flask, Response, jsonify, request

from fuzzratio import config as CFG
from fuzzratio.errors import FuzzySortError
from fuzzratio.normalize import text_units
from fuzzratio.process import ScoreOption, calculate_score, fuzzy_map

log = logging.getLogger(__name__)

app = Flask(__name__)
_items: list[str] = []


def _flag(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _too_long(*texts: str) -> bool:
    return any(len(text_units(t)) > CFG.MAX_INPUT_UNITS for t in texts)


@app.errorhandler(FuzzySortError)
def _bad_sort_args(e: FuzzySortError):
    return jsonify({"error": e.kind.value, "message": str(e)}), 400


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True, "items": len(_items)})


@app.route("/api/score", methods=["GET", "POST"])
def api_score():
    if request.method == "POST":
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "invalid_body", "message": "expected a JSON object"}), 400
    else:
        data = request.args
    a = str(data.get("a", ""))
    b = str(data.get("b", ""))
    fp = data.get("full_process")
    full_process = fp if isinstance(fp, bool) else _flag(fp, CFG.FULL_PROCESS)
    try:
        option = ScoreOption.from_name(str(data.get("scorer", CFG.DEFAULT_SCORER)))
    except ValueError as e:
        return jsonify({"error": "invalid_scorer", "message": str(e)}), 400
    if _too_long(a, b):
        return jsonify({"error": "too_long", "message": f"max {CFG.MAX_INPUT_UNITS} text units"}), 413

    score = calculate_score(a, b, full_process=full_process, score_option=option)
    return jsonify({"score": score, "scorer": option.value})


@app.get("/api/sort")
def api_sort():
    q = request.args.get("q", "", type=str)
    floor = request.args.get("floor", CFG.DEFAULT_FLOOR, type=int)
    k = request.args.get("k", CFG.TOP_K, type=int)
    case_sensitive = _flag(request.args.get("case_sensitive"), CFG.CASE_SENSITIVE)
    full_process = _flag(request.args.get("full_process"), CFG.FULL_PROCESS)
    try:
        option = ScoreOption.from_name(request.args.get("scorer", CFG.DEFAULT_SCORER))
    except ValueError as e:
        return jsonify({"error": "invalid_scorer", "message": str(e)}), 400
    if _too_long(q):
        return jsonify({"error": "too_long", "message": f"max {CFG.MAX_INPUT_UNITS} text units"}), 413

    rows = fuzzy_map(
        _items, q,
        floor=floor, sort=True, case_sensitive=case_sensitive,
        full_process=full_process, score_option=option,
    )
    return jsonify([{"element": r.element, "score": r.score} for r in rows[:k]])


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: one input, results fetched from /api/sort.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>Fuzzy ratio • Flask UI</title>
<style>
body{margin:0;background:#0b0f14;color:#cfd8e3;font:16px/1.45 system-ui,Arial}
.container{max-width:760px;margin:24px auto;padding:0 16px}
input,select{padding:10px 12px;border-radius:10px;border:1px solid #1c2530;background:#0b1117;color:#cfd8e3}
.row{display:grid;grid-template-columns:3rem 5rem 1fr;padding:8px 12px;border-top:1px solid #1c2530}
.err{color:#ffb0b0}
</style>
</head>
<body>
  <div class="container">
    <h1>Fuzzy ratio search</h1>
    <form id="f">
      <input id="q" type="text" placeholder="Type a query…" autocomplete="off" autofocus />
      <select id="scorer">
        <option>standard</option><option>partial</option><option>token_sort</option>
        <option>token_set</option><option>partial_token_set</option><option>partial_token_sort</option>
      </select>
    </form>
    <div id="out"></div>
  </div>
<script>
const q = document.querySelector("#q"), s = document.querySelector("#scorer"), out = document.querySelector("#out");
async function search(){
  if(!q.value){ out.innerHTML = ""; return; }
  const resp = await fetch(`/api/sort?q=${encodeURIComponent(q.value)}&scorer=${s.value}`);
  const data = await resp.json();
  if(!resp.ok){ out.innerHTML = `<div class="err">${data.message}</div>`; return; }
  out.innerHTML = data.map((r,i)=>`<div class="row"><div>${i+1}</div><div>${r.score}</div><div>${r.element}</div></div>`).join("");
}
q.addEventListener("input", search);
s.addEventListener("change", search);
document.querySelector("#f").addEventListener("submit", (ev)=>{ ev.preventDefault(); search(); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def load_items(path: str) -> int:
    """Replace the served item list with the non-blank lines of a file."""
    global _items
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    kept = [ln for ln in lines if ln.strip()]
    _items = [ln for ln in kept if not _too_long(ln)]
    if len(_items) < len(kept):
        log.warning("Skipped %d items longer than %d text units", len(kept) - len(_items), CFG.MAX_INPUT_UNITS)
    log.info("Loaded %d items from %s", len(_items), path)
    return len(_items)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the fuzzy scorers")
    ap.add_argument("--items", default=None, help="File with one item per line, served by /api/sort")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    if args.items:
        load_items(args.items)

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
