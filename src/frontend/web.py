from __future__ import annotations
import argparse
import asyncio
from flask import Flask, request, jsonify, Response

from autocomplete import config as CFG
from autocomplete.engine import Engine
from autocomplete.loader import load_records_async
from autocomplete.models import Config

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", None, type=int)
    if not q:
        return jsonify([])
    if k is not None and k < 0:
        return jsonify({"error": "k must be >= 0"}), 400
    if k is None:
        rows = _engine.complete(q)  # type: ignore[union-attr]
    else:
        rows = _engine.complete(q, max_results=k)  # type: ignore[union-attr]
    return jsonify([r.to_dict() for r in rows])

@app.get("/health")
def health():
    n = _engine.count() if _engine is not None else 0
    return jsonify({"ok": _engine is not None, "records": n})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Autocomplete • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:880px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
input{ padding:10px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; }
#q{ width:100% } #q:focus{ outline:none; border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin:8px 0 }
.row{ display:grid; grid-template-columns:3rem 5rem 5rem 7rem 1fr; gap:10px; padding:10px 12px; border-top:1px solid var(--border); }
.head{ color:var(--muted); font-weight:600; border-top:none }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
mark{ background:rgba(110,231,255,.2); color:inherit; border-bottom:1px solid var(--accent) }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Autocomplete</h1>
      <input id="q" type="text" placeholder="Type to search…" autocomplete="off" autofocus />
      <div class="meta">Max results <input id="k" type="number" min="0" max="50" value="5" style="width:64px" /> <span id="stats">Ready.</span></div>
      <div class="row head"><div>#</div><div>Score</div><div>Index</div><div>Key</div><div>Match</div></div>
      <div id="out" class="empty">Start typing to see results.</div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), out = $("#out"), stats = $("#stats"), k = $("#k");
let t; // debounce timer
const esc = (s) => String(s).replace(/[&<>"]/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
function marked(text, spans){
  if(!Array.isArray(spans)) return esc(text);
  let html = "", last = 0;
  for(const [s, e] of spans){ html += esc(text.slice(last, s)) + "<mark>" + esc(text.slice(s, e)) + "</mark>"; last = e; }
  return html + esc(text.slice(last));
}
async function search(){
  if(q.value.length === 0){ out.className = "empty"; out.innerHTML = "Start typing to see results."; return; }
  const resp = await fetch(`/api/complete?q=${encodeURIComponent(q.value)}&k=${parseInt(k.value || "5", 10)}`);
  const data = resp.ok ? await resp.json() : [];
  stats.textContent = `Results: ${data.length}`;
  if(data.length === 0){ out.className = "empty"; out.innerHTML = "No matches."; return; }
  out.className = "";
  out.innerHTML = data.map((r, i) => {
    const m = r.match ?? {};
    const text = typeof m === "object" && "text" in m ? m.text : (r.key ? r.value[r.key] : r.value);
    return `<div class="row"><div class="small">${i+1}</div><div class="small">${esc(m.score ?? "")}</div>
      <div class="small">${r.index}</div><div class="small">${esc(r.key ?? "—")}</div><div>${marked(String(text), m.spans)}</div></div>`;
  }).join("");
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 150); });
k.addEventListener("change", search);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--data", required=True, help="Records file (.json, .jsonl, .csv or text lines)")
    ap.add_argument("--key", nargs="+", default=None)
    ap.add_argument("--mode", choices=CFG.MODES, default=CFG.SEARCH_MODE)
    ap.add_argument("--threshold", type=int, default=CFG.THRESHOLD)
    ap.add_argument("--diacritics", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    cfg = Config(key=args.key, threshold=args.threshold, mode=args.mode, diacritics=args.diacritics)
    _engine = Engine(cfg, verbose=args.verbose)
    asyncio.run(_engine.load(load_records_async(args.data)))

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
