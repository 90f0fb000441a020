"""
LLM 답변 파서

모델이 JSON 앞뒤로 설명을 섞어도 첫 '[' ~ 마지막 ']' 구간만 잘라서 읽는다.
- 전체가 VideoIdea 리스트로 맞으면 그대로 사용 (pydantic lax 변환: "85" -> 85)
- 하나라도 안 맞으면 통째로 버림 (부분 복구 안 함) -> 빈 리스트
  (필드 누락, 정수가 아닌 점수 87.5 / "85%" 같은 것도 여기에 해당)
"""

from __future__ import annotations

import json
import re
from typing import List

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from backend.app.core.errors import ParseError
from backend.app.core.logger import get_logger
from backend.app.schemas import VideoIdea

logger = get_logger(__name__)

_ARRAY_RE = re.compile(r"\[.*\]", flags=re.DOTALL)
_IDEAS = TypeAdapter(List[VideoIdea])


def extract_ideas(text: str) -> List[VideoIdea]:
    """파싱 실패 시 ParseError"""
    m = _ARRAY_RE.search(text or "")
    if not m:
        raise ParseError("no JSON array in reply")

    try:
        data = json.loads(m.group(0))
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e}") from e

    try:
        return _IDEAS.validate_python(data)
    except SchemaError as e:
        raise ParseError(f"unexpected shape: {e.error_count()} error(s)") from e


def parse_reply(text: str) -> List[VideoIdea]:
    try:
        return extract_ideas(text)
    except ParseError as e:
        logger.warning("Failed to parse AI response, returning no ideas. err=%s", e)
        return []
