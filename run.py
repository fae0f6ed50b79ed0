# =============================================================================
# run.py — Starts the backend (FastAPI) then the Streamlit UI
# =============================================================================
# Usage: python run.py
# Backend: http://127.0.0.1:8000 (PORT overrides)
# UI: http://127.0.0.1:8501
# =============================================================================

import os
import subprocess
import sys
import time

import requests

BACKEND_HOST = "127.0.0.1"
BACKEND_PORT = int(os.environ.get("PORT", "8000"))
STREAMLIT_PORT = 8501

ROOT = os.path.dirname(os.path.abspath(__file__))


def wait_for_backend(url: str, timeout: float = 30.0) -> bool:
    print(f"Waiting for backend at {url}...", end="", flush=True)
    start = time.monotonic()
    while time.monotonic() - start < timeout:
        try:
            r = requests.get(f"{url}/ping", timeout=2)
            if r.status_code == 200:
                print(" Ready!")
                return True
        except requests.RequestException:
            pass
        print(".", end="", flush=True)
        time.sleep(1)
    print(" Timeout.")
    return False


def main() -> int:
    backend_url = f"http://{BACKEND_HOST}:{BACKEND_PORT}"
    backend_cmd = [
        sys.executable,
        "-m", "uvicorn",
        "greetgen.main:app",
        "--host", BACKEND_HOST,
        "--port", str(BACKEND_PORT),
    ]

    print(f"Starting backend on {backend_url}...")
    backend_proc = subprocess.Popen(backend_cmd, cwd=ROOT)

    if not wait_for_backend(backend_url):
        print("Backend failed to start within timeout.")
        backend_proc.terminate()
        return 1

    streamlit_cmd = [
        sys.executable,
        "-m", "streamlit",
        "run", "streamlit_app.py",
        "--server.port", str(STREAMLIT_PORT),
        "--server.address", "127.0.0.1",
        "--browser.gatherUsageStats", "false",
    ]
    front_env = os.environ.copy()
    front_env["BACKEND_URL"] = backend_url

    print(f"Starting streamlit UI on http://127.0.0.1:{STREAMLIT_PORT}...")
    try:
        subprocess.run(streamlit_cmd, cwd=ROOT, env=front_env)
    except KeyboardInterrupt:
        print("\nShutting down...")
    finally:
        backend_proc.terminate()
        backend_proc.wait(timeout=5)
    return 0


if __name__ == "__main__":
    sys.exit(main())
