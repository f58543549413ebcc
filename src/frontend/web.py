from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from search_engine import config as CFG
from search_engine.engine import Engine

app = Flask(__name__)
_engine: Engine | None = None


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = Engine.from_labelled(CFG.DEMO_CORPUS)
    return _engine

# ---------- API ----------
@app.get("/api/search")
def api_search():
    q = request.args.get("q", "", type=str)
    if not q:
        return jsonify([])
    hits = _get_engine().search_hits(q)
    return jsonify([h.to_dict() for h in hits])


@app.get("/health")
def health():
    return jsonify({"ok": True, "documents": len(_get_engine())})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Search • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Arial;
}
.container{ max-width:880px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
form input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
form input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.row{
  display:grid; grid-template-columns:3rem 8rem 7rem 1fr; gap:10px;
  padding:10px 14px; border-top:1px solid var(--border);
}
.head{ font-weight:600; color:var(--muted) }
.mono{ font-family: ui-monospace, Menlo, Consolas, monospace }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Search</h1>
      <form id="f">
        <input id="q" type="text" placeholder="One word, e.g. fox" autocomplete="off" autofocus />
      </form>
      <div id="stats" class="meta">Ready.</div>
      <div class="row head"><div>#</div><div>Label</div><div>TF-IDF</div><div>Document</div></div>
      <div id="out" class="empty">Type a word and press Enter.</div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
document.querySelector("#f").addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  const resp = await fetch(`/api/search?q=${encodeURIComponent(q.value)}`);
  const data = await resp.json();
  stats.textContent = `Results: ${data.length}`;
  if(!data.length){ out.className = "empty"; out.innerHTML = "No matches."; return; }
  out.className = "";
  out.innerHTML = data.map(r => `
    <div class="row">
      <div class="mono">${r.rank}</div>
      <div>${esc(r.label)}</div>
      <div class="mono">${r.score.toFixed(4)}</div>
      <div>${esc(r.document)}</div>
    </div>`).join("");
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--roots", nargs="+", default=[])
    ap.add_argument("--unit", choices=["line", "paragraph"])
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    if args.roots:
        _engine = Engine.from_roots(args.roots, unit=args.unit, verbose=args.verbose)
    else:
        _engine = Engine.from_labelled(CFG.DEMO_CORPUS, verbose=args.verbose)

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
