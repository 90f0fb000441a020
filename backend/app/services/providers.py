"""
외부 LLM provider 호출

- provider A: Anthropic Messages API
- provider B: OpenAI Chat Completions API

둘 다 "프롬프트 1개 -> 답변 텍스트 1개". 재시도/백오프 없음.
실패(네트워크/2xx 아님/응답 구조 이상)는 전부 ProviderError로 통일해서
generator.py가 다음 provider로 넘어가게 한다.
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple

import requests

from backend.app.core.config import Settings
from backend.app.core.errors import ProviderError


class Provider(NamedTuple):
    name: str
    complete: Callable[[str], str]


def _post(name: str, url: str, headers: dict, payload: dict, timeout) -> dict:
    try:
        r = requests.post(url, headers=headers, json=payload, timeout=timeout)
    except requests.RequestException as e:
        raise ProviderError(name, f"request failed: {e}") from e

    if not r.ok:
        raise ProviderError(name, f"HTTP {r.status_code}")

    try:
        return r.json()
    except ValueError as e:
        raise ProviderError(name, "response is not JSON") from e


def call_anthropic(cfg: Settings, prompt: str) -> str:
    headers = {
        "Content-Type": "application/json",
        "x-api-key": cfg.ANTHROPIC_API_KEY,
        "anthropic-version": cfg.ANTHROPIC_VERSION,
    }
    payload = {
        "model": cfg.ANTHROPIC_MODEL,
        "max_tokens": cfg.ANTHROPIC_MAX_TOKENS,
        "messages": [{"role": "user", "content": prompt}],
    }
    data = _post("anthropic", cfg.ANTHROPIC_API_URL, headers, payload, cfg.PROVIDER_TIMEOUT_SEC)

    try:
        text = data["content"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise ProviderError("anthropic", "unexpected response envelope") from e
    if not isinstance(text, str):
        raise ProviderError("anthropic", "reply text is not a string")
    return text


def call_openai(cfg: Settings, prompt: str) -> str:
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {cfg.OPENAI_API_KEY}",
    }
    payload = {
        "model": cfg.OPENAI_MODEL,
        "messages": [{"role": "user", "content": prompt}],
    }
    data = _post("openai", cfg.OPENAI_API_URL, headers, payload, cfg.PROVIDER_TIMEOUT_SEC)

    try:
        text = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ProviderError("openai", "unexpected response envelope") from e
    if not isinstance(text, str):
        raise ProviderError("openai", "reply text is not a string")
    return text


def configured_providers(cfg: Settings) -> List[Provider]:
    """키가 있는 provider만, 우선순위 순서대로 (Anthropic -> OpenAI)"""
    providers: List[Provider] = []
    if cfg.ANTHROPIC_API_KEY:
        providers.append(Provider("anthropic", lambda prompt: call_anthropic(cfg, prompt)))
    if cfg.OPENAI_API_KEY:
        providers.append(Provider("openai", lambda prompt: call_openai(cfg, prompt)))
    return providers
