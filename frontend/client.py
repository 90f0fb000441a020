"""
백엔드 호출 헬퍼 (Streamlit 페이지에서 사용)

화면 코드와 분리해둬서 streamlit 없이도 테스트 가능.
"""

from __future__ import annotations

import os
from typing import List, Optional

import requests

API_BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")


class IdeaRequestError(Exception):
    pass


def request_ideas(
    niche: str,
    trend: str = "",
    api_base: Optional[str] = None,
    timeout: float = 180,
) -> List[dict]:
    base = (api_base or API_BASE).rstrip("/")
    try:
        r = requests.post(
            f"{base}/api/generate",
            json={"niche": niche, "trend": trend},
            timeout=timeout,
        )
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        raise IdeaRequestError(str(e)) from e

    ideas = data.get("ideas") if isinstance(data, dict) else None
    if not isinstance(ideas, list):
        raise IdeaRequestError("response has no ideas list")
    return ideas


def format_hashtags(tags: List[str]) -> str:
    return " ".join(f"#{t}" for t in tags or [])
