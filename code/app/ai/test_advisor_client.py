import pytest
import requests

from app.ai import advisor_client


def _response(content, annotations=None):
    message = {"role": "assistant", "content": content}
    if annotations is not None:
        message["annotations"] = annotations
    return {"choices": [{"index": 0, "message": message}]}


def _citation(url, title):
    return {"type": "url_citation", "url_citation": {"url": url, "title": title}}


def test_extract_text():
    assert advisor_client.extract_text(_response("  Rent looks high.  ")) == "Rent looks high."
    assert advisor_client.extract_text(_response(None)) == ""
    assert advisor_client.extract_text({"choices": []}) == ""


def test_extract_citations_filters_and_dedupes():
    response = _response(
        "text",
        [
            _citation("https://a.example", "A"),
            _citation("https://a.example", "A again"),
            _citation("https://b.example", ""),
            {"type": "file_citation"},
            _citation("https://c.example", "C"),
        ],
    )
    assert advisor_client.extract_citations(response) == [
        {"url": "https://a.example", "title": "A"},
        {"url": "https://c.example", "title": "C"},
    ]
    assert advisor_client.extract_citations(_response("text")) == []


def test_query_without_key_raises(monkeypatch):
    monkeypatch.setattr(advisor_client, "ADVISOR_API_KEY", None)
    assert not advisor_client.has_api_key()
    with pytest.raises(advisor_client.AdvisorUnavailable):
        advisor_client.query_advisor("hello")


class _FakeCompletion:
    def __init__(self, payload):
        self.payload = payload

    def model_dump(self):
        return self.payload


class _FakeClient:
    def __init__(self):
        self.calls = []
        self.chat = self
        self.completions = self

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return _FakeCompletion(_response("ok"))


def test_query_passes_model_and_reasoning(monkeypatch):
    fake = _FakeClient()
    monkeypatch.setattr(advisor_client, "ADVISOR_API_KEY", "test-key")
    monkeypatch.setattr(advisor_client, "_get_client", lambda: fake)

    out = advisor_client.query_advisor("plan please", model="plan-model", reasoning_effort="high")
    assert advisor_client.extract_text(out) == "ok"
    call = fake.calls[0]
    assert call["model"] == "plan-model"
    assert call["reasoning_effort"] == "high"
    assert call["messages"] == [{"role": "user", "content": "plan please"}]

    advisor_client.query_advisor("quick")
    assert fake.calls[1]["model"] == advisor_client.ADVISOR_MODEL
    assert "reasoning_effort" not in fake.calls[1]


def test_base_url_strips_completions_path(monkeypatch):
    monkeypatch.setattr(advisor_client, "ADVISOR_BASE_URL", "https://llm.example/v1/chat/completions?x=1")
    assert advisor_client._base_url() == "https://llm.example/v1"


class _Status:
    def __init__(self, status_code):
        self.status_code = status_code


def test_check_online(monkeypatch):
    monkeypatch.setattr(advisor_client.requests, "get", lambda *a, **k: _Status(401))
    assert advisor_client.check_advisor_online()
    monkeypatch.setattr(advisor_client.requests, "get", lambda *a, **k: _Status(503))
    assert not advisor_client.check_advisor_online()

    def boom(*a, **k):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(advisor_client.requests, "get", boom)
    assert not advisor_client.check_advisor_online(timeout=0.1)


def test_search_tool_reaches_create(monkeypatch):
    fake = _FakeClient()
    monkeypatch.setattr(advisor_client, "ADVISOR_API_KEY", "test-key")
    monkeypatch.setattr(advisor_client, "_get_client", lambda: fake)
    monkeypatch.setattr(advisor_client, "ADVISOR_SEARCH_TOOL", "google_search")

    advisor_client.query_advisor("listings near Austin", search=True)
    assert fake.calls[0]["extra_body"] == {"tools": [{"google_search": {}}]}

    advisor_client.query_advisor("no search")
    assert "extra_body" not in fake.calls[1]

    monkeypatch.setattr(advisor_client, "ADVISOR_SEARCH_TOOL", "")
    advisor_client.query_advisor("search disabled", search=True)
    assert "extra_body" not in fake.calls[2]


def test_extract_citations_reads_grounding_chunks():
    response = _response("text", [_citation("https://a.example", "A")])
    response["choices"][0]["grounding_metadata"] = {
        "grounding_chunks": [
            {"web": {"uri": "https://zillow.example/123", "title": "Zillow"}},
            {"web": {"uri": "https://a.example", "title": "A duplicate"}},
            {"web": {"uri": "https://untitled.example"}},
            {"retrieved_context": {}},
        ]
    }
    assert advisor_client.extract_citations(response) == [
        {"url": "https://a.example", "title": "A"},
        {"url": "https://zillow.example/123", "title": "Zillow"},
    ]
