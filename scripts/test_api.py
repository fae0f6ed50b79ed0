# =============================================================================
# scripts/test_api.py — Quick API smoke test (run with backend on 127.0.0.1:8000)
# =============================================================================
# Usage: python scripts/test_api.py
# =============================================================================

import os
import sys

import requests

BASE = os.environ.get("BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 5


def post(path: str, json: dict) -> tuple[dict | None, int | None]:
    try:
        r = requests.post(f"{BASE}{path}", json=json, timeout=60)
        return r.json(), r.status_code
    except (requests.RequestException, ValueError) as e:
        print(f"POST {path} failed: {e}")
        return None, None


def main() -> int:
    print("1. GET /ping ...")
    try:
        r = requests.get(f"{BASE}/ping", timeout=TIMEOUT)
    except requests.RequestException as e:
        print(f"   Backend not reachable ({e}). Start with: uvicorn greetgen.main:app --host 127.0.0.1 --port 8000")
        return 1
    print("   OK:", r.text)

    print("2. GET /health ...")
    h = requests.get(f"{BASE}/health", timeout=TIMEOUT).json()
    print("   OK: providers =", h.get("providers"))

    print("3. POST /generate (rule-based, christmas) ...")
    out, status = post("/generate", {"prompt": "merry christmas to the team"})
    if status != 200 or not out or "Christmas" not in out.get("message", ""):
        print("   FAIL:", status, out)
        return 1
    print("   OK:", out["message"])

    print("4. POST /api/generate (useLLM=true) ...")
    out, status = post("/api/generate", {"prompt": "birthday wishes", "useLLM": True})
    if status != 200 or not out:
        print("   FAIL:", status, out)
        return 1
    print("   OK:", out["message"])

    print("5. POST /generate without prompt ...")
    out, status = post("/generate", {"useLLM": True})
    if status != 400:
        print("   FAIL: expected 400, got", status, out)
        return 1
    print("   OK: 400", out)

    print("All checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
