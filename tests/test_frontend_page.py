"""Tests for the Streamlit page, driven through streamlit's AppTest."""

from pathlib import Path

from streamlit.testing.v1 import AppTest

from frontend import client as ui_client
from frontend.client import IdeaRequestError

PAGE = str(Path(__file__).resolve().parents[1] / "frontend" / "app.py")

IDEA = {
    "title": "The Cooking Secret Nobody Tells You",
    "hook": "Wait... this Cooking trick actually works?!",
    "script": "[0-3s] Wait...",
    "hashtags": ["cooking", "viral"],
    "viralityScore": 87,
    "reasoning": "Curiosity gap.",
}


def _run_with(monkeypatch, fake_request, niche):
    monkeypatch.setattr(ui_client, "request_ideas", fake_request)
    at = AppTest.from_file(PAGE).run()
    at.text_input[0].input(niche)
    at.button[0].click()
    return at.run()


def test_request_failure_shows_generic_error(monkeypatch):
    def fail(niche, trend):
        raise IdeaRequestError("500 error")

    at = _run_with(monkeypatch, fail, "Cooking")

    assert [e.value for e in at.error] == ["Failed to generate ideas. Please try again."]
    assert not at.exception


def test_blank_niche_never_calls_backend(monkeypatch):
    calls = []

    def record(niche, trend):
        calls.append(niche)
        return []

    at = _run_with(monkeypatch, record, "   ")

    assert [e.value for e in at.error] == ["Please enter a niche or topic"]
    assert calls == []


def test_ideas_are_rendered(monkeypatch):
    at = _run_with(monkeypatch, lambda niche, trend: [IDEA], "Cooking")

    assert not at.error
    assert [s.value for s in at.subheader] == [IDEA["title"]]
