"""Tests for the Streamlit page's backend helper."""

import pytest
import requests

from frontend import client as ui_client
from frontend.client import IdeaRequestError, format_hashtags, request_ideas


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def _patch_post(monkeypatch, result):
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json))
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(ui_client.requests, "post", fake_post)
    return calls


def test_posts_niche_and_trend(monkeypatch):
    ideas = [{"title": "t", "hashtags": ["a"]}]
    calls = _patch_post(monkeypatch, FakeResponse(payload={"ideas": ideas}))

    assert request_ideas("Cooking", "AI Tools", api_base="http://api:9000/") == ideas
    assert calls == [("http://api:9000/api/generate", {"niche": "Cooking", "trend": "AI Tools"})]


def test_empty_list_is_a_result(monkeypatch):
    _patch_post(monkeypatch, FakeResponse(payload={"ideas": []}))

    assert request_ideas("Cooking") == []


@pytest.mark.parametrize(
    "result",
    [
        FakeResponse(status_code=400, payload={"error": "Niche is required"}),
        FakeResponse(status_code=500, payload={"error": "Failed to generate ideas"}),
        FakeResponse(payload={"nope": 1}),
        requests.ConnectionError("refused"),
    ],
)
def test_failures_raise(monkeypatch, result):
    _patch_post(monkeypatch, result)

    with pytest.raises(IdeaRequestError):
        request_ideas("Cooking")


def test_format_hashtags():
    assert format_hashtags(["cooking", "viral"]) == "#cooking #viral"
    assert format_hashtags([]) == ""
