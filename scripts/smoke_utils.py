import base64
import json
import os

import httpx

# Allow overriding base URL/prefix for smoke runs (e.g., pointing at staging)
BASE_URL = os.getenv("SMOKE_BASE_URL", "http://127.0.0.1:8000")
API = os.getenv("SMOKE_API_PREFIX", "/api")


def safe_json(resp: httpx.Response):
    try:
        return resp.json()
    except ValueError:
        return (resp.text or "")[:300]


def print_result(name: str, resp: httpx.Response | None, error: str | None = None, expect: int | None = None) -> None:
    if error is not None:
        print(json.dumps({"name": name, "status": None, "ok": False, "error": error}))
        return
    if expect is not None:
        ok = resp is not None and resp.status_code == expect
    else:
        ok = 200 <= resp.status_code < 300 if resp is not None else False
    body = None
    if resp is not None:
        body = safe_json(resp) if "json" in resp.headers.get("content-type", "") else f"<{len(resp.content)} bytes>"
    print(json.dumps({
        "name": name,
        "status": None if resp is None else resp.status_code,
        "ok": ok,
        "body": body
    }, default=str, ensure_ascii=False))


def safe_call(client: httpx.Client, method: str, url: str, **kwargs) -> tuple[httpx.Response | None, str | None]:
    try:
        r = client.request(method, url, **kwargs)
        return r, None
    except httpx.HTTPError as e:
        return None, str(e)


def encode_chat_payload(payload: dict) -> str:
    """Base64 body the way browser clients send chat requests."""
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def decode_sse_events(text: str) -> list[dict]:
    events = []
    for block in text.split("\n\n"):
        if block.startswith("data: "):
            events.append(json.loads(base64.b64decode(block[len("data: "):]).decode("utf-8")))
    return events
