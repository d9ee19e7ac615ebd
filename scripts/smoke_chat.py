import httpx

from scripts.smoke_utils import BASE_URL, API, safe_call, print_result, encode_chat_payload, decode_sse_events


def main() -> None:
    with httpx.Client(base_url=BASE_URL, timeout=60.0) as client:
        # Negative: body that is not Base64 JSON
        r, err = safe_call(client, "POST", f"{API}/chat", content="%%% not base64 %%%", headers={"Content-Type": "text/plain"})
        print_result("POST /api/chat (garbage, expect 400)", r, err, expect=400)

        # Negative: empty message list
        r, err = safe_call(client, "POST", f"{API}/chat", json={"messages": []})
        print_result("POST /api/chat (no messages, expect 400)", r, err, expect=400)

        # Positive: Base64 body with topic context (503 when the server has no API key)
        payload = {
            "messages": [{"role": "user", "content": "Why do microtasks run before timers?"}],
            "topic": {"slug": "javascript", "phaseId": "phase-3", "topicId": "event-loop-call-stack"},
        }
        r, err = safe_call(client, "POST", f"{API}/chat", content=encode_chat_payload(payload), headers={"Content-Type": "text/plain"})
        print_result("POST /api/chat (base64 with topic)", r, err)
        if r is not None and r.status_code == 200:
            events = decode_sse_events(r.text)
            print({"events": len(events), "last": events[-1] if events else None})


if __name__ == "__main__":
    main()
