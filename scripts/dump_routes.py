# scripts/dump_routes.py
# Usage:
#   python scripts/dump_routes.py [out_file]
# or:
#   python -m scripts.dump_routes [out_file]
from __future__ import annotations

import sys
import json
from pathlib import Path

# --- ensure project root on sys.path ---
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app import create_app  # noqa: E402

API_PREFIX = "/api/"
METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE"}

def collect(app) -> list[dict]:
    """API rules of ``app`` as {url, endpoint, methods}, sorted by url."""
    rows = []
    for rule in app.url_map.iter_rules():
        if not rule.rule.startswith(API_PREFIX):
            continue
        rows.append({
            "url": rule.rule,
            "endpoint": rule.endpoint,
            "methods": sorted(m for m in (rule.methods or []) if m in METHODS),
        })
    rows.sort(key=lambda r: (r["url"], r["endpoint"]))
    return rows

def main():
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("api_routes.txt")
    rows = collect(create_app("dev"))
    out.parent.mkdir(parents=True, exist_ok=True)
    if out.suffix.lower() == ".json":
        out.write_text(json.dumps(rows, ensure_ascii=False, indent=2), encoding="utf-8")
    else:
        lines = [f"{','.join(r['methods']):<18} {r['url']:<45} {r['endpoint']}" for r in rows]
        out.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Saved {len(rows)} API routes to {out}")

if __name__ == "__main__":
    main()
