import base64
import json
from types import SimpleNamespace

import pytest

from src.models.schemas.chat import ChatMessage, ChatRequest, ChatStreamEvent
from src.services import chat as chat_service
from src.utilities.exceptions.chat import InvalidChatPayload, InvalidChatRequest

PAYLOAD = {
    "messages": [{"role": "user", "content": "Explain a-two"}],
    "topic": {"slug": "alpha", "phaseId": "phase-1", "topicId": "a-two"},
}


def b64(data: dict) -> str:
    return base64.b64encode(json.dumps(data).encode("utf-8")).decode("ascii")


def decode_events(body: str) -> list[dict]:
    events = []
    for block in body.split("\n\n"):
        if block:
            assert block.startswith("data: ")
            events.append(json.loads(base64.b64decode(block[len("data: "):])))
    return events


class FakeStream:
    def __init__(self, tokens, fail_after=None):
        self._tokens = list(tokens)
        self._fail_after = fail_after

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for index, token in enumerate(self._tokens):
            if self._fail_after is not None and index == self._fail_after:
                raise RuntimeError("upstream dropped")
            yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=token))])


class FakeClient:
    def __init__(self, tokens=("Hello", None, " world"), fail_after=None):
        self.calls = []
        self._tokens = tokens
        self._fail_after = fail_after
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    async def _create(self, **kwargs):
        self.calls.append(kwargs)
        return FakeStream(self._tokens, self._fail_after)


def test_decode_base64_and_json_bodies():
    from_b64 = chat_service.decode_chat_payload(b64(PAYLOAD).encode("ascii"), "text/plain")
    from_json = chat_service.decode_chat_payload(json.dumps(PAYLOAD).encode("utf-8"), "application/json; charset=utf-8")

    assert from_b64 == from_json
    assert from_b64.topic.phase_id == "phase-1"


@pytest.mark.parametrize("raw", [b"%%% not base64 %%%", base64.b64encode(b"not json")])
def test_decode_rejects_undecodable_payload(raw):
    with pytest.raises(InvalidChatPayload):
        chat_service.decode_chat_payload(raw, "text/plain")


@pytest.mark.parametrize("data", [{}, {"messages": []}, {"messages": "hi"}, [1, 2], {"messages": [{"content": "x"}]}])
def test_decode_rejects_requests_without_usable_messages(data):
    with pytest.raises(InvalidChatRequest):
        chat_service.decode_chat_payload(b64(data).encode("ascii"), None)


def test_unknown_roles_are_treated_as_user_turns():
    request = chat_service.decode_chat_payload(
        b64({"messages": [{"role": "robot", "content": "x"}, {"role": "assistant", "content": "y"}]}).encode("ascii"),
        None,
    )
    assert [message.role for message in request.messages] == ["user", "assistant"]
    assert ChatMessage(role="system", content="z").role == "system"


def test_model_name_prefix():
    assert chat_service.resolve_model_name("gemini-2.0-flash-001") == "google/gemini-2.0-flash-001"
    assert chat_service.resolve_model_name("openai/gpt-4o-mini") == "openai/gpt-4o-mini"


def test_conversation_gets_topic_context(fixture_registry):
    request = ChatRequest.model_validate(PAYLOAD)
    messages = chat_service.build_conversation(request, fixture_registry)

    assert messages[0].role == "system"
    assert "Title: A Two" in messages[0].content
    assert "- Forgetting a-two" in messages[0].content
    assert messages[1] == ChatMessage(role="user", content="Explain a-two")


def test_conversation_without_resolvable_topic(fixture_registry):
    request = ChatRequest.model_validate({**PAYLOAD, "topic": {"slug": "alpha", "phaseId": "phase-1", "topicId": "zzz"}})
    messages = chat_service.build_conversation(request, fixture_registry)
    assert [message.role for message in messages] == ["user"]


def test_encode_event_is_base64_json():
    line = chat_service.encode_event(ChatStreamEvent(type="token", content="héllo"))
    assert line.endswith("\n\n")
    assert decode_events(line) == [{"type": "token", "content": "héllo"}]


@pytest.mark.asyncio
async def test_stream_yields_tokens_then_done():
    client = FakeClient()
    events = [event async for event in chat_service.stream_chat_events(client, [ChatMessage(role="user", content="hi")], model="flash")]

    assert decode_events("".join(events)) == [
        {"type": "token", "content": "Hello"},
        {"type": "token", "content": " world"},
        {"type": "done"},
    ]
    assert client.calls[0]["model"] == "google/flash"
    assert client.calls[0]["stream"] is True


@pytest.mark.asyncio
async def test_stream_failure_becomes_error_event():
    client = FakeClient(tokens=("partial", "never"), fail_after=1)
    events = [event async for event in chat_service.stream_chat_events(client, [ChatMessage(role="user", content="hi")])]

    decoded = decode_events("".join(events))
    assert decoded[0] == {"type": "token", "content": "partial"}
    assert decoded[-1] == {"type": "error", "message": chat_service.STREAM_ERROR_MESSAGE}


def test_chat_endpoint_streams_sse(client, monkeypatch):
    fake = FakeClient()
    monkeypatch.setattr(chat_service, "get_chat_client", lambda: fake)

    resp = client.post("/api/chat", content=b64(PAYLOAD), headers={"Content-Type": "text/plain"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")
    assert resp.headers["cache-control"] == "no-cache, no-transform"
    assert resp.headers["x-accel-buffering"] == "no"
    assert decode_events(resp.text)[-1] == {"type": "done"}
    sent = fake.calls[0]["messages"]
    assert sent[0]["role"] == "system"
    assert sent[-1] == {"role": "user", "content": "Explain a-two"}


def test_chat_endpoint_accepts_json(client, monkeypatch):
    monkeypatch.setattr(chat_service, "get_chat_client", lambda: FakeClient())
    resp = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})
    assert resp.status_code == 200


def test_chat_endpoint_sends_unknown_roles_as_user(client, monkeypatch):
    fake = FakeClient()
    monkeypatch.setattr(chat_service, "get_chat_client", lambda: fake)

    resp = client.post("/api/chat", json={"messages": [{"role": "robot", "content": "hi"}]})

    assert resp.status_code == 200
    assert fake.calls[0]["messages"] == [{"role": "user", "content": "hi"}]


def test_chat_endpoint_400s(client, monkeypatch):
    monkeypatch.setattr(chat_service, "get_chat_client", lambda: FakeClient())

    garbage = client.post("/api/chat", content="%%%", headers={"Content-Type": "text/plain"})
    empty = client.post("/api/chat", content=b64({"messages": []}), headers={"Content-Type": "text/plain"})

    assert garbage.status_code == 400
    assert garbage.json()["detail"] == "Invalid payload format. Expected Base64."
    assert empty.status_code == 400
    assert empty.json()["detail"] == "Invalid request. Please try again."


def test_chat_endpoint_503_without_api_key(client, monkeypatch):
    monkeypatch.setattr(chat_service, "get_chat_client", lambda: None)
    resp = client.post("/api/chat", content=b64(PAYLOAD), headers={"Content-Type": "text/plain"})
    assert resp.status_code == 503
    assert "not configured" in resp.json()["detail"]


def test_chat_endpoint_500_on_unexpected_failure(client, monkeypatch):
    def explode(request, registry):
        raise RuntimeError("boom")

    monkeypatch.setattr(chat_service, "get_chat_client", lambda: FakeClient())
    monkeypatch.setattr(chat_service, "build_conversation", explode)
    resp = client.post("/api/chat", json=PAYLOAD)
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Something went wrong. Please try again later."
