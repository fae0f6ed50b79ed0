# =============================================================================
# streamlit_app.py — Greeting Message Generator UI
# =============================================================================
# Run: streamlit run streamlit_app.py
# Backend: BACKEND_URL (default http://127.0.0.1:8000)
# =============================================================================

import os
import streamlit as st
import requests

# No trailing slash so paths like /api/generate work
BASE_URL = (os.environ.get("BACKEND_URL") or "http://127.0.0.1:8000").rstrip("/")

PROVIDER_CHOICES = {"Auto": None, "Gemini": "gemini", "OpenAI": "openai"}


def fetch_post_json(path: str, json_payload: dict) -> dict | None:
    path = path if path.startswith("/") else "/" + path
    url = f"{BASE_URL}{path}"
    try:
        r = requests.post(url, json=json_payload, timeout=90)
        r.raise_for_status()
        return r.json()
    except ValueError:
        st.error("Backend returned a non-JSON response.")
        return None
    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 400:
            try:
                detail = (e.response.json() or {}).get("error", "Bad request")
            except ValueError:
                detail = e.response.text or "Bad request"
            st.error(detail)
        elif e.response is not None and e.response.status_code == 404:
            st.error(f"Not Found (404). Backend may be wrong or outdated. Using: {BASE_URL}. Run: `uvicorn greetgen.main:app --host 127.0.0.1 --port 8000` then restart the UI.")
        else:
            st.error(f"Request failed: {e}")
        return None
    except requests.exceptions.RequestException as e:
        st.error(f"Request failed: {e}")
        return None


def fill_name(message: str, name: str) -> str:
    return message.replace("{name}", name) if name else message


st.set_page_config(page_title="Greeting Message Generator", layout="centered")
st.title("Greeting Message Generator")
with st.sidebar:
    st.caption(f"Backend: `{BASE_URL}`")
    st.caption("Start both: `python run.py`")
    use_llm = st.toggle("Use an LLM provider", value=False)
    provider_label = st.selectbox("Provider", list(PROVIDER_CHOICES), disabled=not use_llm)

prompt = st.text_area(
    "Prompt",
    placeholder="e.g. Diwali wishes for our customers",
    height=100,
)
name = st.text_input("Recipient name (optional)", placeholder="e.g. Priya")

if st.button("Generate", type="primary"):
    body = {"prompt": prompt or "", "useLLM": use_llm}
    provider = PROVIDER_CHOICES[provider_label]
    if use_llm and provider:
        body["provider"] = provider
    with st.spinner("Writing..."):
        out = fetch_post_json("/api/generate", body)
    if out:
        st.divider()
        st.subheader("Message")
        st.write(fill_name(out.get("message", ""), name.strip()))
        if not name.strip() and "{name}" in out.get("message", ""):
            st.caption("Fill in a recipient name to replace {name}.")
    else:
        st.info("No response. Check backend is running.")
